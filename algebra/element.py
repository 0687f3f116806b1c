# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Single graded terms: one coefficient on one basis blade."""

from algebra.blade import SCALAR, Blade
from algebra.rules import GEOMETRIC, INNER, OUTER, blade_product


def is_number(value) -> bool:
    """Plain scalars only; blades are ints too but are not coefficients."""
    return isinstance(value, (int, float)) and not isinstance(value, (bool, Blade))


class GradedElement:
    """A scalar coefficient attached to a fixed basis blade.

    Operators follow the usual convention:
    ``*`` geometric product, ``|`` inner product (left contraction),
    ``^`` outer product. A plain number operand is the scalar blade, so
    ``*`` and ``^`` scale the coefficient and keep the blade; ``s | A``
    scales too, while ``A | s`` keeps only a scalar ``A``.

    Elements are immutable.

    Attributes:
        blade (Blade): The basis blade.
        coefficient (float): The multiplier in front of the blade.
    """

    __slots__ = ("_blade", "_coefficient")

    def __init__(self, blade=SCALAR, coefficient=0.0):
        self._blade = blade if isinstance(blade, Blade) else Blade(blade)
        self._coefficient = coefficient

    @property
    def blade(self) -> Blade:
        return self._blade

    @property
    def coefficient(self):
        return self._coefficient

    @property
    def value(self):
        return self._coefficient

    def __float__(self):
        return float(self._coefficient)

    def _product(self, kind, other):
        blade, sign = blade_product(kind, self._blade, other._blade)
        return GradedElement(blade, self.coefficient * other.coefficient * sign)

    def _operand(self, other):
        if isinstance(other, GradedElement):
            return other
        if is_number(other):
            return GradedElement(SCALAR, other)
        return None

    def __mul__(self, other):
        """Geometric product (A * B), or scaling by a number."""
        if isinstance(other, GradedElement):
            return self._product(GEOMETRIC, other)
        elif is_number(other):
            return GradedElement(self._blade, self.coefficient * other)
        else:
            return NotImplemented

    def __rmul__(self, other):
        if is_number(other):
            return GradedElement(self._blade, other * self.coefficient)
        return NotImplemented

    def __or__(self, other):
        """Inner product (A | B)."""
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self._product(INNER, other)

    def __ror__(self, other):
        if is_number(other):
            return GradedElement(SCALAR, other)._product(INNER, self)
        return NotImplemented

    def __xor__(self, other):
        """Outer product (A ^ B)."""
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return self._product(OUTER, other)

    def __rxor__(self, other):
        if is_number(other):
            return GradedElement(SCALAR, other)._product(OUTER, self)
        return NotImplemented

    def __neg__(self):
        return GradedElement(self._blade, -self.coefficient)

    def __add__(self, other):
        """Sum into a tuple bounded by the combined blade."""
        from algebra.multivector import Multivector
        if isinstance(other, GradedElement):
            return Multivector.from_elements(self, other)
        elif is_number(other):
            return Multivector.from_elements(self, GradedElement(SCALAR, other))
        else:
            return NotImplemented

    def __radd__(self, other):
        from algebra.multivector import Multivector
        if is_number(other):
            return Multivector.from_elements(GradedElement(SCALAR, other), self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, GradedElement) or is_number(other):
            return self + (-other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, GradedElement):
            if self.coefficient == 0 and other.coefficient == 0:
                return True
            return self._blade == other._blade and self.coefficient == other.coefficient
        return NotImplemented

    def __hash__(self):
        if self.coefficient == 0:
            return hash(0)
        return hash((int(self._blade), self.coefficient))

    def __repr__(self):
        return f"GradedElement({self._blade!r}, {self.coefficient!r})"

    def __str__(self):
        from algebra.formatting import format_element
        return format_element(self)
