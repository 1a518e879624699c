#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Package beziercurves : courbes de Bezier par morceaux en dimension
quelconque.

Stockage des points de controle, ajout de sommets, evaluation par
l'algorithme de De Casteljau.

Usage::

    from beziercurves import Curve

    c = Curve.new2d(grade=3, vertices=2)
    c.set_point2(0, -0.8, -0.8)
    ...
    x, y = c.interpolate2(0.5)

@author: Nervures
@date: 2026-10
"""

from .curve import Curve, DOMAIN_POLICIES, DEFAULT_SAMPLES
from .storage import CurveStorage, ALLOCATION_SIZE, DEFAULT_GRADE
from .binomial import pascal_row, MAX_GRADE
from .curveconfig import (load_config, load_defaults, merge_params,
                          curve_arguments, CURVE_KEYS)
from .exceptions import (CurveError, InvalidConfiguration, IndexOutOfRange,
                         DimensionMismatch, OutOfDomain, AllocationFailure)
