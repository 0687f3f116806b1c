# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Basis blades as generator bitmasks.

Blades are indexed by subsets of the generators {e1, ..., en}:

- ``0`` = scalar (empty set)
- ``1`` = e1, ``2`` = e2, ``4`` = e3, ... (bit ``k-1`` is e_k)
- ``3`` = e1^e2, ``5`` = e1^e3, ``7`` = e1^e2^e3, ...

Two blades combine only through mask operations: OR gives the largest
enclosing subspace, XOR gives the blade of their product (a shared
orthonormal generator squares to +1 and drops out).
"""

from algebra.validation import BladeRangeError, check_blade


class Blade(int):
    """Immutable bitmask identifying a basis blade.

    ``a ^ b`` and ``a | b`` on two blades return blades, so subspaces can
    be spelled the usual way::

        >>> e1 ^ e2
        e1^e2
        >>> (e1 ^ e2).grade
        2
    """

    __slots__ = ()

    def __new__(cls, mask=0):
        return int.__new__(cls, check_blade(int(mask), "Blade"))

    @classmethod
    def _unchecked(cls, mask: int) -> "Blade":
        return int.__new__(cls, mask)

    @classmethod
    def generator(cls, k: int) -> "Blade":
        """Return the blade of the single generator ``e_k`` (1-based)."""
        if k < 1:
            raise BladeRangeError(f"Generator indices start at 1, got {k}")
        return cls(1 << (k - 1))

    @classmethod
    def from_generators(cls, *ks: int) -> "Blade":
        """Combine generator indices into one blade, e.g. ``(1, 3)`` -> e1^e3."""
        mask = 0
        for k in ks:
            bit = cls.generator(k)
            if mask & bit:
                raise ValueError(f"Generator e{k} listed twice in {ks}")
            mask |= bit
        return cls(mask)

    @property
    def grade(self) -> int:
        """Number of generators in the blade."""
        return bin(self).count("1")

    @property
    def generators(self) -> tuple:
        """Ascending generator indices, e.g. ``(1, 3)`` for e1^e3."""
        return tuple(k + 1 for k in range(self.bit_length()) if (self >> k) & 1)

    @property
    def name(self) -> str:
        if self == 0:
            return "scalar"
        return "^".join(f"e{k}" for k in self.generators)

    def __xor__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return Blade(int(self) ^ int(other))
        return NotImplemented

    __rxor__ = __xor__

    def __or__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return Blade(int(self) | int(other))
        return NotImplemented

    __ror__ = __or__

    def __repr__(self):
        return self.name

    def __reduce__(self):
        return (Blade, (int(self),))


def grade(blade: int) -> int:
    """Population count of *blade*."""
    return bin(blade).count("1")


def combine_max(a: int, b: int) -> Blade:
    """Largest enclosing subspace of *a* and *b* (bitwise OR)."""
    return Blade(int(a) | int(b))


def combine_product(a: int, b: int) -> Blade:
    """Blade of the product of *a* and *b* (bitwise XOR)."""
    return Blade(int(a) ^ int(b))


def pseudoscalar(n: int) -> Blade:
    """The blade e1^e2^...^en."""
    if n < 0:
        raise BladeRangeError(f"Dimension must be non-negative, got {n}")
    return Blade((1 << n) - 1)


SCALAR = Blade._unchecked(0)
e1 = Blade._unchecked(0x001)
e2 = Blade._unchecked(0x002)
e3 = Blade._unchecked(0x004)
e4 = Blade._unchecked(0x008)
e5 = Blade._unchecked(0x010)
e6 = Blade._unchecked(0x020)
e7 = Blade._unchecked(0x040)
e8 = Blade._unchecked(0x080)
e9 = Blade._unchecked(0x100)
