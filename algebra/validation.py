# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Range checks for blades and tuple bounds.

Unlike plain ``assert`` checks these always run: a blade outside its
tuple or a narrowing copy would silently corrupt results.
"""

from algebra.config import get_config


class GATupleError(Exception):
    """Base class for engine errors."""


class BladeRangeError(GATupleError, IndexError):
    """A blade lies outside the generator range or a tuple's bound."""


class NarrowingError(GATupleError, ValueError):
    """A tuple copy would drop coefficients above the target bound."""


def check_blade(blade, name: str = "blade") -> int:
    """Raise unless *blade* is a mask over the configured generators.

    Returns:
        The blade as a plain ``int``.
    """
    if isinstance(blade, bool) or not isinstance(blade, int):
        raise TypeError(f"{name}: expected an int mask, got {type(blade).__name__}")
    limit = get_config().max_blade
    if blade < 0 or blade > limit:
        raise BladeRangeError(
            f"{name}: mask {blade:#x} outside 0..{limit:#x} "
            f"({get_config().max_generators} generators)"
        )
    return int(blade)


def check_bound(blade: int, bound: int, name: str = "blade") -> None:
    """Raise :class:`BladeRangeError` if *blade* is above *bound*."""
    if blade < 0 or blade > bound:
        raise BladeRangeError(
            f"{name}: slot {blade:#x} outside tuple bound {bound:#x}"
        )


def check_narrowing(source_bound: int, target_bound: int) -> None:
    """Raise :class:`NarrowingError` when *target_bound* < *source_bound*."""
    if target_bound < source_bound:
        raise NarrowingError(
            f"Data loss would ensue: cannot copy a tuple bounded at "
            f"{source_bound:#x} into one bounded at {target_bound:#x}"
        )
