# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Dual and cross product, built from the three basic products."""

from algebra.blade import Blade, combine_max
from algebra.element import GradedElement
from algebra.multivector import Multivector


def reversion_sign(pseudoscalar) -> int:
    """``(-1) ** (g (g - 1) / 2)`` for the grade ``g`` of *pseudoscalar*.

    Multiplying the pseudo-scalar by this sign gives its inverse, since
    every generator squares to +1.
    """
    g = Blade(pseudoscalar).grade
    return -1 if (g * (g - 1) // 2) % 2 else 1


def dual(mv: Multivector) -> Multivector:
    """Computes the dual of a tuple: ``mv | I^-1`` with ``I = mv.bound``.

    The tuple's bound is taken as the pseudo-scalar, so build the tuple
    with the bound of the space it lives in (e.g. ``e1^e2^e3^e4`` for
    homogeneous 3-space).

    Args:
        mv (Multivector): Input tuple.

    Returns:
        Multivector: The dual, with the same bound.
    """
    inverse = GradedElement(mv.bound, float(reversion_sign(mv.bound)))
    return mv | inverse


def _bound_of(value):
    if isinstance(value, GradedElement):
        return value.blade
    return value.bound


def cross(a, b, pseudoscalar=None):
    """Cross product ``-(I * (a ^ b))``.

    Args:
        a: Left vector (element or tuple).
        b: Right vector (element or tuple).
        pseudoscalar (int, optional): The space's pseudo-scalar ``I``.
            Defaults to ``combine_max`` of the operand bounds; pass
            ``e1^e2^e3`` explicitly for vectors that do not span 3-space.

    Returns:
        Same kind as the operands' wedge: the vector orthogonal to both.
    """
    if pseudoscalar is None:
        pseudoscalar = combine_max(_bound_of(a), _bound_of(b))
    I = GradedElement(Blade(pseudoscalar), 1.0)
    return -(I * (a ^ b))
