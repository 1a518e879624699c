#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Parametres de creation des courbes.

Fichiers de configuration : cle=valeur, une par ligne, lignes commencant
par # ignorees, types inferes (bool, int, float, str). Seules les cles de
:data:`CURVE_KEYS` sont acceptees, dans un fichier comme en surcharge ::

    DIMENSION=2
    GRADE=3
    VERTICES=0
    DOMAIN=strict
    ALLOCATION_SIZE=4096

@author: Nervures
@date: 2026-10
"""

import os
import numbers

from .exceptions import InvalidConfiguration

# Cle -> (argument de Curve, type attendu)
CURVE_KEYS = {
    'DIMENSION': ('dimension', numbers.Integral),
    'GRADE': ('grade', numbers.Integral),
    'VERTICES': ('vertices', numbers.Integral),
    'DOMAIN': ('domain', str),
    'ALLOCATION_SIZE': ('allocation_size', numbers.Integral),
}


def _parse_value(value_str):
    u"""Infere le type d'une valeur depuis sa representation texte."""
    s = value_str.strip()
    if s.lower() in ('true', 'yes', 'on'):
        return True
    if s.lower() in ('false', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(s)
        except ValueError:
            pass
    return s


def check_keys(params, origin):
    u"""Met les cles en majuscules et refuse les cles inconnues.

    :param params: parametres a verifier (peuvent etre None)
    :type params: dict or None
    :param origin: provenance, pour le message d'erreur
    :type origin: str
    :returns: parametres aux cles normalisees
    :rtype: dict
    :raises InvalidConfiguration: si une cle n'est pas dans CURVE_KEYS
    """
    checked = {}
    for key, value in (params or {}).items():
        name = str(key).strip().upper()
        if name not in CURVE_KEYS:
            raise InvalidConfiguration(
                u"Parametre inconnu '%s' (%s). Attendus : %s"
                % (key, origin, ', '.join(sorted(CURVE_KEYS))))
        checked[name] = value
    return checked


def load_config(filepath):
    u"""Charge un fichier de configuration de courbe.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: parametres, cles en majuscules
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    :raises InvalidConfiguration: si une cle est inconnue
    """
    if not os.path.isfile(filepath):
        raise IOError(u"Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, value = line.split('=', 1)
            params[key] = _parse_value(value)
    return check_keys(params, filepath)


def load_defaults(name='curve'):
    u"""Charge defaults_<name>.cfg, place a cote de ce module."""
    cfg_dir = os.path.dirname(os.path.abspath(__file__))
    return load_config(os.path.join(cfg_dir, 'defaults_%s.cfg' % name))


def merge_params(defaults, user_params):
    u"""Fusionne les parametres utilisateur avec les defauts.

    :param defaults: parametres par defaut
    :type defaults: dict
    :param user_params: surcharges (peuvent etre None)
    :type user_params: dict or None
    :returns: parametres fusionnes
    :rtype: dict
    """
    merged = dict(defaults)
    if user_params:
        merged.update(user_params)
    return merged


def curve_arguments(filepath=None, overrides=None):
    u"""Arguments de creation d'une courbe.

    Priorite : ``overrides`` > fichier ``filepath`` > defaults_curve.cfg.

    :param filepath: fichier .cfg (None = defauts seuls)
    :type filepath: str or None
    :param overrides: surcharges, cles insensibles a la casse
    :type overrides: dict or None
    :returns: arguments nommes de Curve (dimension, grade, ...)
    :rtype: dict
    :raises InvalidConfiguration: cle inconnue, manquante ou mal typee
    """
    cfg = load_defaults('curve')
    if filepath is not None:
        cfg = merge_params(cfg, load_config(filepath))
    cfg = merge_params(cfg, check_keys(overrides, u'surcharge'))
    kwargs = {}
    for key, (argument, kind) in CURVE_KEYS.items():
        if key not in cfg:
            raise InvalidConfiguration(
                u"Parametre de configuration manquant : %s" % key)
        value = cfg[key]
        if isinstance(value, bool) or not isinstance(value, kind):
            raise InvalidConfiguration(
                u"%s doit etre de type %s, recu %r"
                % (key, kind.__name__, value))
        kwargs[argument] = value
    return kwargs
