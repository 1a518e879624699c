#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Courbe de Bezier par morceaux, de dimension et de grade arbitraires.

Evaluation par l'algorithme de De Casteljau.

Creation::

    # Cubique plane, un segment (2 sommets, 4 points de controle)
    c = Curve.new2d(grade=3, vertices=2)
    for i, (x, y) in enumerate([(-.8, -.8), (-.6, .8), (.6, -.6), (.8, .6)]):
        c.set_point2(i, x, y)

    # Ou par ajout de sommets (poignees placees automatiquement)
    c = Curve.standard()
    c.append_point2(0, 0)
    c.append_point2(10, 0)

    # Evaluation
    x, y = c.interpolate2(0.5)
    pt = c.interpolatev(0.5)              # ndarray(2,)
    pts = c.evaluate([0, .25, .5, 1])     # ndarray(4, 2)
    poly = c.sample(128)                  # polyligne, ndarray(129, 2)

Les differentes formes d'un meme accesseur (vecteur, arguments variables,
2D, 3D) deleguent toutes a la forme vectorielle.

@author: Nervures
@date: 2026-10
"""

import math
import logging
import operator

import numpy as np

from .storage import CurveStorage, ALLOCATION_SIZE, as_coordinates
from .curveconfig import curve_arguments
from .exceptions import (InvalidConfiguration, IndexOutOfRange,
                         DimensionMismatch, OutOfDomain)

logger = logging.getLogger(__name__)

DOMAIN_POLICIES = ('strict', 'clamp')
# Nombre d'intervalles par defaut pour sample()
DEFAULT_SAMPLES = 128

# --------------------------------------------------------------------------
#  Algorithme de De Casteljau (fonctions utilitaires)
# --------------------------------------------------------------------------


def _lerp(a, b, t):
    return (1.0 - t) * a + t * b


def _de_casteljau(points, t):
    u"""Evalue un segment de Bezier en t par l'algorithme de De Casteljau.

    Chaque passe remplace pts[j] par lerp(pts[j], pts[j+1], t) ; apres
    ``grade`` passes il reste une valeur. Les colonnes (coordonnees)
    sont traitees independamment.

    :param points: points de controle, ndarray(g+1,) ou ndarray(g+1, dim)
    :param t: parametre scalaire
    :returns: valeur (float) ou point sur la courbe, ndarray(dim,)
    """
    pts = np.array(points, dtype=float)
    n = len(pts) - 1
    for r in range(1, n + 1):
        pts[:n - r + 1] = _lerp(pts[:n - r + 1], pts[1:n - r + 2], t)
    return pts[0]


# --------------------------------------------------------------------------
#  Classe Curve
# --------------------------------------------------------------------------

class Curve(object):
    u"""Courbe de Bezier par morceaux dans un espace de dimension fixe.

    La courbe passe par ``vertices`` sommets ; entre deux sommets
    consecutifs, un segment de ``grade + 1`` points de controle.
    Les points de controle sont adresses par un index a plat
    ``n = segment * (grade + 1) + k``.

    Dimension et grade sont fixes a la creation.
    """

    def __init__(self, dimension=2, grade=3, vertices=0, domain='strict',
                 allocation_size=ALLOCATION_SIZE):
        u"""
        :param dimension: nombre de coordonnees par point (>= 1)
        :type dimension: int
        :param grade: points de controle par segment moins un
            (0 = 3, cubique ; 1 = segments droits)
        :type grade: int
        :param vertices: nombre initial de sommets ; les points de
            controle correspondants valent 0 et se remplissent avec
            :meth:`set_pointv`
        :type vertices: int
        :param domain: traitement de t hors de [0, 1] :
            'strict' (OutOfDomain) ou 'clamp'
        :type domain: str
        :param allocation_size: granularite d'allocation en octets
        :type allocation_size: int
        """
        self._check_domain(domain)
        self._storage = CurveStorage(dimension, grade, vertices,
                                     allocation_size)
        self._domain = domain
        logger.debug(u"Creation %r", self)

    @classmethod
    def new2d(cls, grade=3, vertices=0, **kwargs):
        u"""Courbe plane (dimension 2)."""
        return cls(2, grade, vertices, **kwargs)

    @classmethod
    def new3d(cls, grade=3, vertices=0, **kwargs):
        u"""Courbe dans l'espace (dimension 3)."""
        return cls(3, grade, vertices, **kwargs)

    @classmethod
    def standard(cls):
        u"""Courbe standard : plane, cubique, sans sommet."""
        return cls(2, 3, 0)

    @classmethod
    def from_config(cls, filepath=None, **params):
        u"""Cree une courbe a partir des parametres de configuration.

        Ordre de priorite : ``params`` > fichier ``filepath`` >
        defaults_curve.cfg.

        :param filepath: fichier .cfg (None = defauts seuls)
        :type filepath: str or None
        :param params: surcharges (dimension=3, grade=2, ...), cles
            insensibles a la casse
        :returns: nouvelle courbe
        :rtype: Curve
        """
        kwargs = curve_arguments(filepath, params)
        if filepath is not None:
            logger.info(u"Configuration de courbe lue dans %s", filepath)
        return cls(**kwargs)

    # ------------------------------------------------------------------
    #  Representation
    # ------------------------------------------------------------------

    def __repr__(self):
        return "Curve(dim=%d, grade=%d, %d sommets)" % (
            self.dimension, self.grade, self.vertices)

    def __len__(self):
        return self._storage.vertices

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def dimension(self):
        u"""Nombre de coordonnees par point."""
        return self._storage.dimension

    @property
    def grade(self):
        u"""Grade effectif (un grade 0 a la creation donne 3)."""
        return self._storage.grade

    @property
    def vertices(self):
        u"""Nombre de sommets (points de passage)."""
        return self._storage.vertices

    @property
    def segment_count(self):
        return self._storage.segment_count

    @property
    def point_count(self):
        u"""Nombre de points de controle stockes."""
        return self._storage.point_count

    @property
    def binomial_row(self):
        u"""Coefficients C(grade, k), k = 0..grade (copie)."""
        return self._storage.binomial_row

    @property
    def control_points(self):
        u"""Copie des points de controle, ndarray(point_count, dim)."""
        return self._storage.points()

    @property
    def domain(self):
        u"""Traitement de t hors de [0, 1] ('strict' ou 'clamp')."""
        return self._domain

    @domain.setter
    def domain(self, value):
        self._check_domain(value)
        self._domain = value

    @staticmethod
    def _check_domain(value):
        if value not in DOMAIN_POLICIES:
            raise InvalidConfiguration(
                u"Domaine inconnu %r. Attendu : 'strict', 'clamp'"
                % (value,))

    def _require_dimension(self, dimension):
        if self.dimension != dimension:
            raise DimensionMismatch(
                u"Accesseur de dimension %d sur une courbe de dimension %d"
                % (dimension, self.dimension))

    # ------------------------------------------------------------------
    #  Ecriture de points
    # ------------------------------------------------------------------

    def set_pointv(self, n, coordinates):
        u"""Ecrit le point de controle ``n``.

        :param n: index a plat du point de controle
        :type n: int
        :param coordinates: ``dimension`` coordonnees
        :type coordinates: array-like
        :returns: self (pour chainage)
        :rtype: Curve
        :raises IndexOutOfRange: si n n'adresse pas un point stocke
        :raises DimensionMismatch: si le nombre de coordonnees est faux
        """
        self._storage.write(n, coordinates)
        return self

    def set_point(self, n, *coordinates):
        u"""Ecrit le point de controle ``n`` : ``set_point(n, x, y, ...)``."""
        return self.set_pointv(n, coordinates)

    def set_point2(self, n, x, y):
        self._require_dimension(2)
        return self.set_pointv(n, (x, y))

    def set_point3(self, n, x, y, z):
        self._require_dimension(3)
        return self.set_pointv(n, (x, y, z))

    # ------------------------------------------------------------------
    #  Ajout de sommets
    # ------------------------------------------------------------------

    def append_pointv(self, coordinates):
        u"""Ajoute un sommet en fin de courbe.

        Le premier sommet est stocke a l'index 0. Ensuite chaque ajout
        cree un segment : le sommet precedent est recopie en tete, le
        nouveau sommet en fin, et les poignees intermediaires sont
        reparties regulierement sur la corde (segment droit, a modifier
        ensuite avec :meth:`set_pointv`).

        :param coordinates: ``dimension`` coordonnees
        :type coordinates: array-like
        :returns: index a plat du sommet ajoute
        :rtype: int
        """
        anchor = as_coordinates(coordinates, self.dimension)
        storage = self._storage
        if storage.vertices == 0:
            block = anchor.reshape(1, -1)
            last = 0
        else:
            previous = storage.read(storage.anchor_index(storage.vertices - 1))
            g = storage.grade
            ratios = np.arange(g + 1, dtype=float) / g
            block = previous + np.outer(ratios, anchor - previous)
            # extremites exactes
            block[0] = previous
            block[-1] = anchor
            last = g
        index = storage.reserve_for_append()
        storage.write_block(index, block)
        storage.commit_append()
        return index + last

    def append_point(self, *coordinates):
        u"""Ajoute un sommet : ``append_point(x, y, ...)``."""
        return self.append_pointv(coordinates)

    def append_point2(self, x, y):
        self._require_dimension(2)
        return self.append_pointv((x, y))

    def append_point3(self, x, y, z):
        self._require_dimension(3)
        return self.append_pointv((x, y, z))

    # ------------------------------------------------------------------
    #  Lecture de points
    # ------------------------------------------------------------------

    def get_pointv(self, n):
        u"""Coordonnees stockees du point de controle ``n``.

        Simple lecture, pas d'interpolation.

        :param n: index a plat du point de controle
        :type n: int
        :returns: copie des coordonnees, ndarray(dim,)
        :rtype: numpy.ndarray
        :raises IndexOutOfRange: si n n'adresse pas un point stocke
        """
        return self._storage.read(n)

    def get_point(self, n):
        u"""Coordonnees du point ``n`` sous forme de tuple de floats."""
        return tuple(float(v) for v in self.get_pointv(n))

    def get_point2(self, n):
        self._require_dimension(2)
        return self.get_point(n)

    def get_point3(self, n):
        self._require_dimension(3)
        return self.get_point(n)

    def anchors(self):
        u"""Sommets (points de passage) de la courbe, ndarray(vertices, dim)."""
        storage = self._storage
        result = np.empty((storage.vertices, storage.dimension), dtype=float)
        for i in range(storage.vertices):
            result[i] = storage.read(storage.anchor_index(i))
        return result

    # ------------------------------------------------------------------
    #  Evaluation
    # ------------------------------------------------------------------

    def _parameter(self, t):
        u"""Valide t selon la politique de domaine."""
        t = float(t)
        if math.isnan(t):
            raise OutOfDomain(u"t n'est pas un nombre")
        if t < 0.0 or t > 1.0:
            if self._domain == 'strict':
                raise OutOfDomain(
                    u"t doit etre dans [0, 1], recu %g" % t)
            t = min(1.0, max(0.0, t))
        return t

    def _segment(self, t):
        u"""Index du segment couvrant t (t deja valide)."""
        n_seg = self._storage.segment_count
        if n_seg < 1:
            raise IndexOutOfRange(
                u"Il faut au moins 2 sommets pour evaluer, recu %d"
                % self._storage.vertices)
        s = int(math.floor(t * n_seg))
        # t == 1 donnerait le segment n_seg, qui n'existe pas
        if s == n_seg:
            s -= 1
        return s

    def interpolate_axis(self, axis, t):
        u"""Coordonnee ``axis`` du point de la courbe en t.

        Le t global est utilise tel quel dans chaque interpolation,
        sans reparametrage local au segment.

        :param axis: index de la coordonnee (0 a dimension-1)
        :type axis: int
        :param t: parametre dans [0, 1]
        :type t: float
        :rtype: float
        """
        if axis < 0 or axis >= self.dimension:
            raise IndexOutOfRange(
                u"Axe %d hors limites en dimension %d"
                % (axis, self.dimension))
        t = self._parameter(t)
        values = self._storage.axis_values(self._segment(t), axis)
        return float(_de_casteljau(values, t))

    def interpolatev(self, t):
        u"""Point de la courbe en t (De Casteljau).

        :param t: parametre dans [0, 1]
        :type t: float
        :returns: point sur la courbe, ndarray(dim,)
        :rtype: numpy.ndarray
        :raises OutOfDomain: si t est hors de [0, 1] en mode 'strict'
        :raises IndexOutOfRange: si la courbe a moins de 2 sommets
        """
        t = self._parameter(t)
        block = self._storage.segment_block(self._segment(t))
        return _de_casteljau(block, t)

    def interpolate(self, t):
        u"""Point de la courbe en t, tuple de ``dimension`` floats."""
        return tuple(float(v) for v in self.interpolatev(t))

    def interpolate2(self, t):
        self._require_dimension(2)
        return self.interpolate(t)

    def interpolate3(self, t):
        self._require_dimension(3)
        return self.interpolate(t)

    def evaluate(self, t):
        u"""Evalue la courbe en t.

        :param t: parametre(s) dans [0, 1], scalaire ou array
        :type t: float or numpy.ndarray
        :returns: point(s) sur la courbe
        :rtype: ndarray(dim,) si t scalaire, ndarray(m, dim) si t array
        """
        t = np.asarray(t, dtype=float)
        if t.ndim == 0:
            return self.interpolatev(float(t))
        result = np.empty((len(t), self.dimension), dtype=float)
        for i, ti in enumerate(t):
            result[i] = self.interpolatev(float(ti))
        return result

    def sample(self, n=DEFAULT_SAMPLES):
        u"""Polyligne approchant la courbe.

        Evalue la courbe en t = i/n, i = 0..n.

        :param n: nombre d'intervalles (>= 1)
        :type n: int
        :returns: points, ndarray(n+1, dim)
        :rtype: numpy.ndarray
        """
        n = operator.index(n)
        if n < 1:
            raise ValueError(u"n doit etre >= 1, recu %d" % n)
        return self.evaluate(np.arange(n + 1) / float(n))

    def bernstein(self, t):
        u"""Point de la courbe en t par la forme de Bernstein.

        B(t) = sum C(g, k) * t^k * (1 - t)^(g - k) * P_k sur le segment
        couvrant t, avec les coefficients de :attr:`binomial_row`.
        Meme resultat que :meth:`interpolatev` aux arrondis pres ;
        sert de controle, l'evaluation normale passe par De Casteljau.

        :param t: parametre dans [0, 1]
        :type t: float
        :returns: point sur la courbe, ndarray(dim,)
        """
        t = self._parameter(t)
        block = self._storage.segment_block(self._segment(t))
        g = self.grade
        k = np.arange(g + 1)
        weights = self._storage.binomial_row.astype(float) \
            * t**k * (1.0 - t)**(g - k)
        return weights.dot(block)
