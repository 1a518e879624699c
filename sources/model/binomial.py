#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Table des coefficients binomiaux.

Ligne ``level`` du triangle de Pascal, construite en place :
on part de [1, 0, ..., 0] et on ajoute a chaque case la case de gauche,
en parcourant les indices du plus grand au plus petit.

    >>> pascal_row(3)
    array([1, 3, 3, 1], dtype=uint64)

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .exceptions import InvalidConfiguration

# C(64, 32) tient dans un uint64, C(68, 34) non
MAX_GRADE = 64


def pascal_row(level):
    u"""Ligne ``level`` du triangle de Pascal.

    :param level: rang de la ligne (0 <= level <= MAX_GRADE)
    :type level: int
    :returns: C(level, 0) ... C(level, level), ndarray(level+1,)
    :rtype: numpy.ndarray (uint64)
    :raises InvalidConfiguration: si level est hors limites
    """
    if level < 0 or level > MAX_GRADE:
        raise InvalidConfiguration(
            u"level doit etre dans [0, %d], recu %d" % (MAX_GRADE, level))
    out = np.zeros(level + 1, dtype=np.uint64)
    out[0] = 1
    for i in range(1, level + 1):
        for j in range(i, 0, -1):
            out[j] += out[j - 1]
    return out
