#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Tests pour la table des coefficients binomiaux.

Lance :
    python test_binomial.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import unittest

import numpy as np
from scipy.special import comb

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.binomial import pascal_row, MAX_GRADE
from model.exceptions import InvalidConfiguration


class TestPascalRow(unittest.TestCase):
    u"""Tests de la ligne du triangle de Pascal."""

    def test_level_0(self):
        u"""level=0 -> [1]."""
        np.testing.assert_array_equal(pascal_row(0), [1])

    def test_level_3(self):
        u"""level=3 -> [1, 3, 3, 1]."""
        np.testing.assert_array_equal(pascal_row(3), [1, 3, 3, 1])

    def test_length(self):
        u"""level+1 coefficients."""
        for level in range(10):
            self.assertEqual(len(pascal_row(level)), level + 1)

    def test_dtype_unsigned(self):
        u"""Entiers non signes."""
        self.assertEqual(pascal_row(5).dtype, np.uint64)

    def test_matches_scipy(self):
        u"""C(level, k) identiques a scipy.special.comb."""
        for level in range(0, 30):
            row = pascal_row(level)
            for k in range(level + 1):
                self.assertEqual(int(row[k]), comb(level, k, exact=True))

    def test_max_grade_exact(self):
        u"""Ligne MAX_GRADE exacte (pas de debordement)."""
        row = pascal_row(MAX_GRADE)
        mid = MAX_GRADE // 2
        self.assertEqual(int(row[mid]), comb(MAX_GRADE, mid, exact=True))
        self.assertEqual(int(row[0]), 1)
        self.assertEqual(int(row[-1]), 1)

    def test_pascal_recurrence(self):
        u"""row(n)[k] = row(n-1)[k-1] + row(n-1)[k]."""
        prev = pascal_row(11)
        row = pascal_row(12)
        for k in range(1, 12):
            self.assertEqual(row[k], prev[k - 1] + prev[k])

    def test_negative_raises(self):
        u"""level < 0 -> InvalidConfiguration."""
        with self.assertRaises(InvalidConfiguration):
            pascal_row(-1)

    def test_too_large_raises(self):
        u"""level > MAX_GRADE -> InvalidConfiguration (aussi ValueError)."""
        with self.assertRaises(ValueError):
            pascal_row(MAX_GRADE + 1)


if __name__ == '__main__':
    unittest.main()
