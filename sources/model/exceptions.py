#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Exceptions des courbes de Bezier par morceaux.

Chaque exception derive aussi de l'exception standard correspondante
(ValueError, IndexError, MemoryError) : un appelant qui intercepte les
exceptions standard continue de fonctionner.

@author: Nervures
@date: 2026-10
"""


class CurveError(Exception):
    u"""Exception de base du package."""


class InvalidConfiguration(CurveError, ValueError):
    u"""Parametres de creation invalides (dimension, grade, sommets...)."""


class IndexOutOfRange(CurveError, IndexError):
    u"""Index de point de controle hors de l'etendue stockee."""


class DimensionMismatch(CurveError, ValueError):
    u"""Nombre de coordonnees different de la dimension de la courbe."""


class OutOfDomain(CurveError, ValueError):
    u"""Parametre t hors de [0, 1]."""


class AllocationFailure(CurveError, MemoryError):
    u"""Echec d'allocation du tampon de coordonnees (fatal)."""
