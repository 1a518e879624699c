#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Tests pour la configuration des courbes.

Lance :
    python test_curveconfig.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import tempfile
import unittest

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.curveconfig import (load_config, load_defaults, merge_params,
                               curve_arguments, CURVE_KEYS)
from model.curve import Curve
from model.exceptions import InvalidConfiguration


class TestLoadConfig(unittest.TestCase):
    u"""Tests de lecture des fichiers cle=valeur."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def _write(self, text):
        path = os.path.join(self.tmpdir, 'test.cfg')
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_types_inferred(self):
        u"""int, bool et str inferes, cles en majuscules."""
        path = self._write(u"# commentaire\n"
                           u"dimension = 3\n"
                           u"VERTICES=yes\n"
                           u"DOMAIN=clamp\n"
                           u"\n"
                           u"ligne sans egal\n")
        cfg = load_config(path)
        self.assertEqual(cfg, {'DIMENSION': 3, 'VERTICES': True,
                               'DOMAIN': 'clamp'})

    def test_unknown_key_in_file_raises(self):
        u"""Cle inconnue dans le fichier -> InvalidConfiguration."""
        path = self._write(u"DIMENSION=3\nRATIO=0.5\n")
        with self.assertRaises(InvalidConfiguration):
            load_config(path)

    def test_missing_file_raises(self):
        u"""Fichier absent -> IOError."""
        with self.assertRaises(IOError):
            load_config(os.path.join(self.tmpdir, 'absent.cfg'))

    def test_defaults(self):
        u"""defaults_curve.cfg : courbe standard."""
        cfg = load_defaults('curve')
        self.assertEqual(cfg['DIMENSION'], 2)
        self.assertEqual(cfg['GRADE'], 3)
        self.assertEqual(cfg['VERTICES'], 0)
        self.assertEqual(cfg['DOMAIN'], 'strict')
        self.assertEqual(cfg['ALLOCATION_SIZE'], 4096)

    def test_merge_params(self):
        u"""Les parametres utilisateur surchargent les defauts."""
        merged = merge_params({'A': 1, 'B': 2}, {'B': 3})
        self.assertEqual(merged, {'A': 1, 'B': 3})
        self.assertEqual(merge_params({'A': 1}, None), {'A': 1})


class TestCurveFromConfig(unittest.TestCase):
    u"""Tests de Curve.from_config."""

    def test_defaults_only(self):
        u"""Sans fichier : courbe standard."""
        c = Curve.from_config()
        self.assertEqual((c.dimension, c.grade, c.vertices), (2, 3, 0))
        self.assertEqual(c.domain, 'strict')

    def test_overrides(self):
        u"""Surcharges par mots-cles, insensibles a la casse."""
        c = Curve.from_config(dimension=3, GRADE=2, domain='clamp')
        self.assertEqual((c.dimension, c.grade), (3, 2))
        self.assertEqual(c.domain, 'clamp')

    def test_file(self):
        u"""Fichier de configuration, surcharge par mots-cles."""
        fd, path = tempfile.mkstemp(suffix='.cfg')
        os.close(fd)
        with open(path, 'w') as f:
            f.write(u"DIMENSION=4\nGRADE=5\nVERTICES=2\n")
        c = Curve.from_config(path, vertices=3)
        os.remove(path)
        self.assertEqual((c.dimension, c.grade, c.vertices), (4, 5, 3))

    def test_invalid_value(self):
        u"""Valeur invalide -> InvalidConfiguration."""
        with self.assertRaises(InvalidConfiguration):
            Curve.from_config(dimension=0)
        with self.assertRaises(InvalidConfiguration):
            Curve.from_config(dimension='deux')
        with self.assertRaises(InvalidConfiguration):
            Curve.from_config(grade=True)

    def test_misspelled_override_raises(self):
        u"""Surcharge mal orthographiee -> InvalidConfiguration."""
        with self.assertRaises(InvalidConfiguration):
            Curve.from_config(grad=5, dimensoin=3)
        with self.assertRaises(ValueError):
            Curve.from_config(samples=64)

    def test_misspelled_file_key_raises(self):
        u"""Fichier avec une cle mal orthographiee -> InvalidConfiguration."""
        fd, path = tempfile.mkstemp(suffix='.cfg')
        os.close(fd)
        with open(path, 'w') as f:
            f.write(u"DIMENSION=3\nGRAD=5\n")
        try:
            with self.assertRaises(InvalidConfiguration):
                Curve.from_config(path)
        finally:
            os.remove(path)

    def test_curve_arguments(self):
        u"""curve_arguments : arguments nommes de Curve."""
        kwargs = curve_arguments(overrides={'Domain': 'clamp'})
        self.assertEqual(kwargs, {'dimension': 2, 'grade': 3,
                                  'vertices': 0, 'domain': 'clamp',
                                  'allocation_size': 4096})
        self.assertEqual(set(k.lower() for k in CURVE_KEYS), set(kwargs))


if __name__ == '__main__':
    unittest.main()
