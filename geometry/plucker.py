# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Rudimentary support for Plücker coordinates.

Points, lines and planes of 3-space live in homogeneous coordinates,
as tuples bounded by ``e1^e2^e3^e4`` with ``e4`` the homogeneous
weight. Lines and planes are wedges of points; the meet of two flats
is ``dual(a) | b``.
"""

from algebra.blade import e1, e2, e3, e4
from algebra.multivector import Multivector
from geometry.dual import dual
from geometry.literals import E1, E2, E3, E4

#: Bound of every homogeneous 3-space tuple.
SPACE = e1 ^ e2 ^ e3 ^ e4


def point(x: float, y: float, z: float) -> Multivector:
    """Generates a point in 3-space: ``x e1 + y e2 + z e3 + e4``."""
    return (x * E1) + (y * E2) + (z * E3) + E4(1.0)


def line(u: Multivector, v: Multivector) -> Multivector:
    """Line through two points (use :func:`point` for both)."""
    return u ^ v


def plane(p1: Multivector, p2: Multivector, p3: Multivector) -> Multivector:
    """Plane through three points (use :func:`point` for all three)."""
    return p1 ^ p2 ^ p3


def meet(a: Multivector, b: Multivector) -> Multivector:
    """Intersection of two flats, e.g. a line and a plane give a point."""
    return dual(a) | b


def incident(a: Multivector, b: Multivector, atol: float = 1e-5) -> bool:
    """True when ``a ^ b`` vanishes, e.g. a point lying on a line or plane."""
    return next((a ^ b).occupied(atol), None) is None


def to_euclidean(p: Multivector, eps: float = 1e-9):
    """Divide out the homogeneous weight of a point.

    Raises:
        ValueError: For a point at infinity (zero ``e4`` weight).
    """
    w = p[e4]
    if abs(w) <= eps:
        raise ValueError(f"Point at infinity has no Euclidean coordinates: {p}")
    return (p[e1] / w, p[e2] / w, p[e3] / w)
