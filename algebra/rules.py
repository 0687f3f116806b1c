# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Sign and grade rule for products of basis blades.

For blades L and R (ascending generator sets) every product lands on
``L ^ R``. The sign is the parity of the swaps needed to sort the
concatenation L R: for each generator of R, count the generators of L
with a larger index. Shared generators add nothing more, since each
squares to +1.

Which products survive:
    geometric: always
    outer:     grade(L ^ R) == grade(L) + grade(R)   (disjoint blades)
    inner:     grade(L ^ R) == grade(R) - grade(L)   (L inside R)
"""

from functools import lru_cache

import torch

from algebra.blade import Blade, grade
from algebra.config import get_config
from algebra.validation import check_blade
from log import get_logger

logger = get_logger(__name__)

GEOMETRIC = "geometric"
INNER = "inner"
OUTER = "outer"
PRODUCT_KINDS = (GEOMETRIC, INNER, OUTER)

_CACHED_TABLES = {}


def check_kind(kind: str) -> str:
    if kind not in PRODUCT_KINDS:
        raise ValueError(f"Unknown product kind: {kind!r}. Available: {list(PRODUCT_KINDS)}")
    return kind


@lru_cache(maxsize=None)
def _swap_parity(left: int, right: int) -> int:
    swaps = 0
    for j in range(right.bit_length()):
        if (right >> j) & 1:
            # Generators of left strictly above generator j of right
            swaps += grade(left >> (j + 1))
    return -1 if swaps % 2 else 1


def product_sign(left: int, right: int) -> int:
    """Sign (+1/-1) of the geometric product of two basis blades.

    Both blades are checked against the current generator cap on every
    call.

    Args:
        left (int): Left blade mask.
        right (int): Right blade mask.

    Returns:
        int: ``(-1) ** swaps``.
    """
    check_blade(left, "left")
    check_blade(right, "right")
    return _swap_parity(int(left), int(right))


def outer_nonzero(left: int, right: int) -> bool:
    """True when the wedge of the two blades does not vanish."""
    return grade(left ^ right) == grade(left) + grade(right)


def inner_nonzero(left: int, right: int) -> bool:
    """True when left contracts onto right (left's generators inside right's)."""
    return grade(left ^ right) == grade(right) - grade(left)


def blade_product(kind: str, left: int, right: int):
    """Apply one product kind to two blades.

    Returns:
        tuple: ``(blade, sign)`` where ``sign`` is 0 when the product
        vanishes for this pair.
    """
    check_kind(kind)
    sign = product_sign(left, right)
    if kind == OUTER and not outer_nonzero(left, right):
        sign = 0
    elif kind == INNER and not inner_nonzero(left, right):
        sign = 0
    return Blade(left ^ right), sign


def _popcount(x: torch.Tensor, bits: int) -> torch.Tensor:
    count = torch.zeros_like(x)
    temp = x
    for _ in range(bits):
        count += temp & 1
        temp = temp >> 1
    return count


def _build_table(kind, left_bound, right_bound, dtype, device):
    """Index and sign tables for every slot pair of two tuples."""
    bits = max(int(left_bound).bit_length(), int(right_bound).bit_length(), 1)
    A = torch.arange(left_bound + 1, device=device).unsqueeze(1)  # Row
    B = torch.arange(right_bound + 1, device=device).unsqueeze(0)  # Col

    indices = A ^ B

    # Count pairs (i in A, j in B) with i > j
    swap_counts = torch.zeros_like(indices)
    for i in range(bits):
        a_i = (A >> i) & 1
        b_lower = B & ((1 << i) - 1)
        swap_counts = swap_counts + a_i * _popcount(b_lower, bits)

    signs = 1 - 2 * (swap_counts % 2)

    if kind != GEOMETRIC:
        grade_a = _popcount(A, bits)
        grade_b = _popcount(B, bits)
        grade_ab = _popcount(indices, bits)
        if kind == OUTER:
            keep = grade_ab == grade_a + grade_b
        else:
            keep = grade_ab == grade_b - grade_a
        signs = signs * keep.to(signs.dtype)

    return indices, signs.to(dtype=dtype)


def product_table(kind: str, left_bound: int, right_bound: int,
                  dtype=None, device=None):
    """Cached ``(indices, signs)`` tables for two tuple bounds.

    ``indices[i, j]`` is the blade of slot ``i`` times slot ``j`` and
    ``signs[i, j]`` the signed factor (0 where the product vanishes).

    Tables are never mutated once stored. Two threads racing on the same
    first call may both build it; ``setdefault`` keeps one and every
    caller gets that one.

    Args:
        kind (str): ``"geometric"``, ``"inner"`` or ``"outer"``.
        left_bound (int): Bound of the left tuple.
        right_bound (int): Bound of the right tuple.
        dtype (torch.dtype, optional): Sign dtype. Defaults to the config dtype.
        device (str, optional): Defaults to the config device.

    Returns:
        tuple: ``(indices [L+1, R+1] long, signs [L+1, R+1])``.
    """
    check_kind(kind)
    check_blade(left_bound, "left_bound")
    check_blade(right_bound, "right_bound")
    config = get_config()
    dtype = dtype or config.torch_dtype
    device = device or config.device

    cache_key = (kind, int(left_bound), int(right_bound), dtype, str(device))
    table = _CACHED_TABLES.get(cache_key)
    if table is None:
        logger.debug("Building %s table for bounds %#x x %#x",
                     kind, left_bound, right_bound)
        table = _CACHED_TABLES.setdefault(
            cache_key, _build_table(kind, int(left_bound), int(right_bound), dtype, device))
    return table
