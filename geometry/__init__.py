# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Derived operations: dual, cross product, homogeneous Plücker helpers
and shorthand basis constructors."""

from .dual import dual, cross, reversion_sign
from .plucker import SPACE, point, line, plane, meet, incident, to_euclidean
from .literals import BasisElement, basis, parse_blade, literal

__all__ = [
    "dual",
    "cross",
    "reversion_sign",
    "SPACE",
    "point",
    "line",
    "plane",
    "meet",
    "incident",
    "to_euclidean",
    "BasisElement",
    "basis",
    "parse_blade",
    "literal",
]
