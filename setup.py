#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='beziercurves',
    version='0.1.0',
    description='Piecewise Bezier curves of arbitrary dimension - storage, '
                'point editing, De Casteljau evaluation',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'beziercurves': 'sources/model',
    },
    packages=['beziercurves'],
    package_data={
        'beziercurves': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
    ],
    extras_require={
        'test': ['scipy>=1.7'],
        'demo': ['matplotlib>=3.5'],
    },
    python_requires='>=3.8',
)
