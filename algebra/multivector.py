# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Multivector Tuple Class.

Holds a sum of graded elements as a dense coefficient tensor indexed by
blade, from the scalar up to a fixed bound (the pseudo-scalar of the
tuple), and overloads the arithmetic operators on top of it.
"""

import torch

from algebra.blade import SCALAR, Blade, combine_max
from algebra.config import get_config
from algebra.element import GradedElement, is_number
from algebra.rules import GEOMETRIC, INNER, OUTER, product_table
from algebra.validation import BladeRangeError, check_bound, check_narrowing


class Multivector:
    """Sparse multivector stored as coefficients ``0..bound``.

    Allows natural mathematical syntax: ``A * B`` (geometric),
    ``A | B`` (inner), ``A ^ B`` (outer), ``A + B``, ``-A``.

    Attributes:
        bound (Blade): Largest blade slot; every operation stays inside it.
        tensor (torch.Tensor): The raw coefficient tensor [bound + 1].
    """

    def __init__(self, bound=SCALAR, tensor: torch.Tensor = None, dtype=None, device=None):
        """Initializes a Multivector.

        Args:
            bound (int): Largest blade slot.
            tensor (torch.Tensor, optional): Coefficients [bound + 1]. Zeros
                when omitted.
            dtype (torch.dtype, optional): Defaults to the config dtype.
            device (str, optional): Defaults to the config device.
        """
        self.bound = bound if isinstance(bound, Blade) else Blade(bound)
        if tensor is None:
            config = get_config()
            tensor = torch.zeros(
                self.bound + 1,
                dtype=dtype or config.torch_dtype,
                device=device or config.device,
            )
        elif tensor.shape != (self.bound + 1,):
            raise ValueError(
                f"Expected {self.bound + 1} coefficients for bound {self.bound!r}, "
                f"got shape {tuple(tensor.shape)}"
            )
        self.tensor = tensor

    @classmethod
    def from_element(cls, element: GradedElement, bound=None):
        """Creates a tuple holding a single element.

        Args:
            element (GradedElement): The term.
            bound (int, optional): Defaults to the element's blade.

        Returns:
            Multivector: Wrapper instance.
        """
        mv = cls(element.blade if bound is None else bound)
        mv.assign(element)
        return mv

    @classmethod
    def from_elements(cls, *elements: GradedElement):
        """Sums elements into a tuple bounded by all their blades OR'd."""
        bound = SCALAR
        for element in elements:
            bound = combine_max(bound, element.blade)
        mv = cls(bound)
        for element in elements:
            mv += element
        return mv

    @classmethod
    def from_multivector(cls, other: "Multivector", bound=None):
        """Deep copy of *other*, optionally widened to *bound*.

        Raises:
            NarrowingError: If *bound* is below ``other.bound``.
        """
        bound = other.bound if bound is None else Blade(bound)
        check_narrowing(other.bound, bound)
        tensor = torch.zeros(bound + 1, dtype=other.tensor.dtype, device=other.tensor.device)
        tensor[: other.bound + 1] = other.tensor
        return cls(bound, tensor)

    def embed(self, bound) -> "Multivector":
        """Lossless copy into a tuple with an equal or larger bound."""
        return Multivector.from_multivector(self, bound)

    def copy(self) -> "Multivector":
        return Multivector.from_multivector(self)

    def __repr__(self):
        return f"Multivector(bound={self.bound!r}, dtype={self.tensor.dtype})"

    def __str__(self):
        from algebra.formatting import format_multivector
        return format_multivector(self)

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------

    def at(self, blade) -> GradedElement:
        """Read one slot as a graded element."""
        check_bound(blade, self.bound)
        return GradedElement(Blade(blade), self.tensor[int(blade)].item())

    def __getitem__(self, blade) -> float:
        check_bound(blade, self.bound)
        return self.tensor[int(blade)].item()

    def __setitem__(self, blade, value):
        check_bound(blade, self.bound)
        self.tensor[int(blade)] = float(value)

    def assign(self, element: GradedElement) -> "Multivector":
        """Overwrite the slot of *element* with its coefficient."""
        self[element.blade] = element.coefficient
        return self

    def accumulate(self, blade, value) -> "Multivector":
        """Add *value* into the slot for *blade*."""
        check_bound(blade, self.bound)
        self.tensor[int(blade)] += float(value)
        return self

    def __len__(self):
        return self.bound + 1

    def for_each(self, action) -> None:
        """Call ``action(element)`` for every slot in ascending blade order."""
        for element in self:
            action(element)

    def __iter__(self):
        for blade, value in enumerate(self.tensor.tolist()):
            yield GradedElement(Blade(blade), value)

    def occupied(self, eps: float = 0.0):
        """Yield only the elements with ``|coefficient| > eps``."""
        for element in self:
            if abs(element.coefficient) > eps:
                yield element

    def _widened(self, other: "Multivector"):
        bound = combine_max(self.bound, other.bound)
        a = torch.zeros(bound + 1, dtype=self.tensor.dtype, device=self.tensor.device)
        b = torch.zeros_like(a)
        a[: self.bound + 1] = self.tensor
        b[: other.bound + 1] = other.tensor.to(dtype=a.dtype, device=a.device)
        return a, b

    def isclose(self, other, atol: float = 1e-6) -> bool:
        """Coefficient-wise comparison, widening the smaller bound first."""
        other = _as_multivector(other)
        if other is None:
            return False
        a, b = self._widened(other)
        return torch.allclose(a, b, atol=atol)

    def __eq__(self, other):
        """Exact coefficient equality; bounds may differ."""
        other = _as_multivector(other)
        if other is None:
            return NotImplemented
        a, b = self._widened(other)
        return torch.equal(a, b)

    __hash__ = None

    # ------------------------------------------------------------------
    # Summation
    # ------------------------------------------------------------------

    def __iadd__(self, other):
        """In-place accumulation; the bound never grows."""
        if isinstance(other, GradedElement):
            return self.accumulate(other.blade, other.coefficient)
        elif isinstance(other, Multivector):
            if other.bound > self.bound:
                raise BladeRangeError(
                    f"Cannot accumulate a tuple bounded at {other.bound:#x} "
                    f"into one bounded at {self.bound:#x}"
                )
            self.tensor[: other.bound + 1] += other.tensor.to(self.tensor.dtype)
            return self
        elif is_number(other):
            return self.accumulate(SCALAR, other)
        else:
            return NotImplemented

    def __add__(self, other):
        """Sum into a new tuple bounded by both operands."""
        if isinstance(other, GradedElement):
            other_bound = other.blade
        elif isinstance(other, Multivector):
            other_bound = other.bound
        elif is_number(other):
            other_bound = SCALAR
        else:
            return NotImplemented
        result = self.embed(combine_max(self.bound, other_bound))
        result += other
        return result

    __radd__ = __add__

    def __neg__(self):
        return Multivector(self.bound, -self.tensor)

    def __sub__(self, other):
        if isinstance(other, (GradedElement, Multivector)) or is_number(other):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, GradedElement) or is_number(other):
            return (-self) + other
        return NotImplemented

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def __mul__(self, other):
        """Geometric Product (A * B)."""
        if is_number(other):
            return Multivector(self.bound, self.tensor * other)
        return _product(GEOMETRIC, self, other)

    def __rmul__(self, other):
        if is_number(other):
            return Multivector(self.bound, other * self.tensor)
        return _product(GEOMETRIC, other, self)

    def __or__(self, other):
        """Inner Product (A | B)."""
        if is_number(other):
            # Only the scalar slot contracts onto a number
            tensor = torch.zeros_like(self.tensor)
            tensor[0] = self.tensor[0] * other
            return Multivector(self.bound, tensor)
        return _product(INNER, self, other)

    def __ror__(self, other):
        if is_number(other):
            return Multivector(self.bound, other * self.tensor)
        return _product(INNER, other, self)

    def __xor__(self, other):
        """Outer Product (A ^ B)."""
        if is_number(other):
            return Multivector(self.bound, self.tensor * other)
        return _product(OUTER, self, other)

    def __rxor__(self, other):
        if is_number(other):
            return Multivector(self.bound, other * self.tensor)
        return _product(OUTER, other, self)

    def dual(self) -> "Multivector":
        """Dual with respect to this tuple's bound."""
        from geometry.dual import dual
        return dual(self)


def _as_multivector(value):
    if isinstance(value, Multivector):
        return value
    if isinstance(value, GradedElement):
        return Multivector.from_element(value)
    return None


def _product(kind: str, left, right):
    """Evaluate one product kind over every slot pair of two operands.

    The result is bounded by ``combine_max`` of the operand bounds. A
    non-zero term landing above that bound raises rather than being
    dropped.
    """
    lhs = _as_multivector(left)
    rhs = _as_multivector(right)
    if lhs is None or rhs is None:
        return NotImplemented

    bound = combine_max(lhs.bound, rhs.bound)
    A = lhs.tensor
    B = rhs.tensor.to(dtype=A.dtype, device=A.device)
    indices, signs = product_table(kind, lhs.bound, rhs.bound, dtype=A.dtype, device=A.device)

    # terms[i, j] = A[i] * B[j] * sign(i, j), landing on blade indices[i, j]
    terms = A.unsqueeze(-1) * B.unsqueeze(0) * signs
    inside = indices <= bound
    if not inside.all() and (terms[~inside] != 0).any():
        lost = indices[(~inside) & (terms != 0)].max().item()
        raise BladeRangeError(
            f"{kind} product reaches slot {lost:#x} outside result bound {bound:#x}"
        )

    result = torch.zeros(bound + 1, dtype=A.dtype, device=A.device)
    result.index_add_(0, indices[inside], terms[inside])
    return Multivector(bound, result)
