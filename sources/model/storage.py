#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Stockage des coordonnees d'une courbe de Bezier par morceaux.

Toutes les coordonnees sont rangees dans un unique tampon numpy (float64),
agrandi par blocs de taille fixe au fil des ajouts de points.

Organisation du tampon (par segment) ::

    segment 0 : P0 P1 ... Pg    (g = grade, g+1 points de controle)
    segment 1 : P0 P1 ... Pg
    ...

chaque point occupant ``dimension`` cases consecutives. L'index a plat
d'un point de controle est ``n = s * (g + 1) + k`` et son offset dans le
tampon est ``dimension * n`` : c'est la seule fonction d'adressage
(:meth:`CurveStorage.offset`), utilisee par tous les accesseurs.

Les deux extremites d'un segment sont des sommets (points de passage) ;
un sommet interieur est donc stocke deux fois, en fin d'un segment et en
debut du suivant.

@author: Nervures
@date: 2026-10
"""

import logging
import operator

import numpy as np

from .binomial import pascal_row, MAX_GRADE
from .exceptions import (InvalidConfiguration, IndexOutOfRange,
                         DimensionMismatch, AllocationFailure)

logger = logging.getLogger(__name__)

# Granularite d'allocation en octets (multiple de la taille d'un double)
ALLOCATION_SIZE = (4096 // 8) * 8
# grade 0 a la creation = courbe cubique
DEFAULT_GRADE = 3

_DTYPE = np.float64


def _check_int(name, value, minimum):
    u"""Verifie qu'un parametre de creation est un entier >= minimum."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(
            u"%s doit etre un entier, recu %r" % (name, value))
    if value < minimum:
        raise InvalidConfiguration(
            u"%s doit etre >= %d, recu %d" % (name, minimum, value))
    return int(value)


def as_coordinates(values, dimension):
    u"""Convertit des coordonnees en vecteur float de longueur ``dimension``.

    :param values: coordonnees d'un point
    :type values: array-like
    :param dimension: dimension attendue
    :type dimension: int
    :returns: ndarray(dimension,)
    :raises DimensionMismatch: si la forme ne correspond pas
    """
    pts = np.asarray(values, dtype=float)
    if pts.ndim != 1 or pts.shape[0] != dimension:
        raise DimensionMismatch(
            u"coordonnees doit etre un vecteur (%d,), recu shape %s"
            % (dimension, str(pts.shape)))
    return pts


class CurveStorage(object):
    u"""Tampon de coordonnees d'une courbe, a croissance par blocs.

    La capacite (en coordonnees) est toujours un multiple de la
    granularite et toujours >= la taille requise par le nombre de
    sommets courant.
    """

    def __init__(self, dimension, grade, vertices=0,
                 allocation_size=ALLOCATION_SIZE):
        u"""
        :param dimension: nombre de coordonnees par point (>= 1)
        :type dimension: int
        :param grade: nombre de points de controle par segment moins un
            (0 = 3, cubique)
        :type grade: int
        :param vertices: nombre initial de sommets
        :type vertices: int
        :param allocation_size: granularite d'allocation en octets
        :type allocation_size: int
        """
        dimension = _check_int('dimension', dimension, 1)
        grade = _check_int('grade', grade, 0)
        vertices = _check_int('vertices', vertices, 0)
        allocation_size = _check_int('allocation_size', allocation_size, 1)
        itemsize = np.dtype(_DTYPE).itemsize
        if allocation_size % itemsize:
            raise InvalidConfiguration(
                u"allocation_size doit etre un multiple de %d octets, "
                u"recu %d" % (itemsize, allocation_size))
        if grade == 0:
            grade = DEFAULT_GRADE
        if grade > MAX_GRADE:
            raise InvalidConfiguration(
                u"grade doit etre <= %d, recu %d" % (MAX_GRADE, grade))

        self._dimension = dimension
        self._grade = grade
        self._vertices = vertices
        self._chunk = allocation_size // itemsize
        self._binomial_row = pascal_row(grade)
        required = self.size_for(vertices)
        chunks = max(1, -(-required // self._chunk))
        self._buffer = self._allocate(chunks * self._chunk)

    def __repr__(self):
        return "CurveStorage(dim=%d, grade=%d, %d sommets, %d/%d)" % (
            self._dimension, self._grade, self._vertices,
            self.required_size, self.capacity)

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def dimension(self):
        u"""Nombre de coordonnees par point."""
        return self._dimension

    @property
    def grade(self):
        u"""Grade effectif (apres remplacement de 0 par 3)."""
        return self._grade

    @property
    def vertices(self):
        u"""Nombre de sommets (points de passage)."""
        return self._vertices

    @property
    def binomial_row(self):
        u"""Ligne ``grade`` du triangle de Pascal (copie), ndarray(grade+1,)."""
        return self._binomial_row.copy()

    @property
    def chunk_size(self):
        u"""Granularite d'allocation, en coordonnees."""
        return self._chunk

    @property
    def capacity(self):
        u"""Nombre de coordonnees allouees."""
        return len(self._buffer)

    @property
    def required_size(self):
        u"""Nombre de coordonnees utilisees par les sommets courants."""
        return self.size_for(self._vertices)

    @property
    def point_count(self):
        u"""Nombre de points de controle adressables."""
        return self.required_size // self._dimension

    @property
    def segment_count(self):
        u"""Nombre de segments (sommets - 1)."""
        return max(self._vertices - 1, 0)

    def size_for(self, vertices):
        u"""Nombre de coordonnees requis pour ``vertices`` sommets.

        Un sommet isole occupe la premiere case du segment 0.
        """
        if vertices == 0:
            return 0
        if vertices == 1:
            return self._dimension
        return self._dimension * (vertices - 1) * (self._grade + 1)

    # ------------------------------------------------------------------
    #  Adressage
    # ------------------------------------------------------------------

    def offset(self, segment, control, axis):
        u"""Offset a plat d'une coordonnee dans le tampon.

        :param segment: index du segment (>= 0)
        :param control: index du point dans le segment (0 a grade)
        :param axis: index de la coordonnee (0 a dimension-1)
        :returns: offset dans le tampon
        :rtype: int
        """
        if segment < 0:
            raise IndexOutOfRange(
                u"Index de segment negatif : %d" % segment)
        if control < 0 or control > self._grade:
            raise IndexOutOfRange(
                u"Index %d hors limites pour %d points par segment"
                % (control, self._grade + 1))
        if axis < 0 or axis >= self._dimension:
            raise IndexOutOfRange(
                u"Axe %d hors limites en dimension %d"
                % (axis, self._dimension))
        return (segment * (self._grade + 1) + control) \
            * self._dimension + axis

    def point_offset(self, n):
        u"""Offset du premier coefficient du point de controle ``n``.

        :raises IndexOutOfRange: si n n'adresse pas un point stocke
        """
        n = operator.index(n)
        count = self.point_count
        if n < 0 or n >= count:
            raise IndexOutOfRange(
                u"Index %d hors limites pour %d points de controle"
                % (n, count))
        segment, control = divmod(n, self._grade + 1)
        return self.offset(segment, control, 0)

    def anchor_index(self, i):
        u"""Index a plat du sommet ``i`` (fin du segment i-1)."""
        i = operator.index(i)
        if i < 0 or i >= self._vertices:
            raise IndexOutOfRange(
                u"Sommet %d hors limites pour %d sommets"
                % (i, self._vertices))
        if i == 0:
            return 0
        return (i - 1) * (self._grade + 1) + self._grade

    # ------------------------------------------------------------------
    #  Lecture / ecriture
    # ------------------------------------------------------------------

    def read(self, n):
        u"""Copie des coordonnees du point de controle ``n``, ndarray(dim,)."""
        off = self.point_offset(n)
        return self._buffer[off:off + self._dimension].copy()

    def write(self, n, values):
        u"""Ecrit les coordonnees du point de controle ``n``."""
        values = as_coordinates(values, self._dimension)
        off = self.point_offset(n)
        self._buffer[off:off + self._dimension] = values

    def write_block(self, n, block):
        u"""Ecrit des points consecutifs a partir de l'index ``n``.

        Utilise par l'ajout de points : la zone doit etre allouee, pas
        forcement deja comptee dans les sommets.

        :param block: points a ecrire, ndarray(m, dim)
        """
        block = np.asarray(block, dtype=float)
        if block.ndim != 2 or block.shape[1] != self._dimension:
            raise DimensionMismatch(
                u"block doit etre un tableau (m, %d), recu shape %s"
                % (self._dimension, str(block.shape)))
        start = self._dimension * operator.index(n)
        stop = start + block.size
        if start < 0 or stop > len(self._buffer):
            raise IndexOutOfRange(
                u"Zone [%d, %d[ hors du tampon alloue (%d)"
                % (start, stop, len(self._buffer)))
        self._buffer[start:stop] = block.ravel()

    def axis_values(self, segment, axis):
        u"""Coordonnees ``axis`` des grade+1 points du segment (copie)."""
        self._check_segment(segment)
        first = self.offset(segment, 0, axis)
        last = self.offset(segment, self._grade, axis)
        return self._buffer[first:last + 1:self._dimension].copy()

    def segment_block(self, segment):
        u"""Points de controle du segment (copie), ndarray(grade+1, dim)."""
        self._check_segment(segment)
        start = self.offset(segment, 0, 0)
        stop = start + (self._grade + 1) * self._dimension
        return self._buffer[start:stop].reshape(
            self._grade + 1, self._dimension).copy()

    def points(self):
        u"""Copie de tous les points de controle, ndarray(point_count, dim)."""
        used = self.required_size
        return self._buffer[:used].reshape(-1, self._dimension).copy()

    def _check_segment(self, segment):
        if segment < 0 or segment >= self.segment_count:
            raise IndexOutOfRange(
                u"Segment %d hors limites pour %d segments"
                % (segment, self.segment_count))

    # ------------------------------------------------------------------
    #  Croissance
    # ------------------------------------------------------------------

    def reserve_for_append(self):
        u"""Prepare l'ajout d'un sommet.

        Agrandit le tampon si le prochain ajout le deborderait, puis
        retourne l'index a plat ou commence le bloc a ecrire : 0 pour le
        premier sommet, debut du nouveau segment sinon. Le nombre de
        sommets n'est pas modifie (voir :meth:`commit_append`).

        Un agrandissement invalide toute vue obtenue auparavant sur le
        tampon.

        :returns: index a plat du debut du bloc
        :rtype: int
        :raises AllocationFailure: si la memoire manque
        """
        if self._vertices == 0:
            index = 0
        else:
            index = (self._vertices - 1) * (self._grade + 1)
        self._grow(self.size_for(self._vertices + 1))
        return index

    def commit_append(self):
        u"""Compte le sommet dont les donnees viennent d'etre ecrites."""
        needed = self.size_for(self._vertices + 1)
        if needed > len(self._buffer):
            raise IndexOutOfRange(
                u"Aucune place reservee pour le sommet %d" % self._vertices)
        self._vertices += 1

    def _grow(self, needed):
        capacity = len(self._buffer)
        if needed <= capacity:
            return
        chunks = -(-needed // self._chunk)
        buf = self._allocate(chunks * self._chunk)
        used = self.required_size
        buf[:used] = self._buffer[:used]
        logger.debug(u"Tampon agrandi : %d -> %d coordonnees",
                     capacity, len(buf))
        self._buffer = buf

    @staticmethod
    def _allocate(size):
        try:
            return np.zeros(size, dtype=_DTYPE)
        except (MemoryError, ValueError, OverflowError) as e:
            raise AllocationFailure(
                u"Impossible d'allouer %d coordonnees" % size) from e
