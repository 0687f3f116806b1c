# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Human-readable text for blades, elements and tuples."""

from algebra.blade import Blade

#: Coefficients at or below this magnitude are left out of tuple text.
DISPLAY_EPS = 1e-5


def format_blade(blade) -> str:
    """``e1^e3`` style name; ``1`` for the scalar."""
    blade = blade if isinstance(blade, Blade) else Blade(blade)
    if blade == 0:
        return "1"
    return blade.name


def _format_number(value: float) -> str:
    return f"{value:g}"


def format_element(element) -> str:
    if element.blade == 0:
        return _format_number(element.coefficient)
    return f"{_format_number(element.coefficient)} {format_blade(element.blade)}"


def format_multivector(mv, eps: float = DISPLAY_EPS) -> str:
    """Signed sum of the non-negligible terms, in ascending blade order.

    Example:
        ``1 e1 - 2 e2^e3 + 0.5 e4``; an all-zero tuple gives ``0``.
    """
    parts = []
    for element in mv.occupied(eps):
        magnitude = abs(element.coefficient)
        text = _format_number(magnitude)
        if element.blade != 0:
            text = f"{text} {format_blade(element.blade)}"
        if element.coefficient < 0:
            parts.append(f"- {text}" if not parts else f" - {text}")
        else:
            parts.append(text if not parts else f" + {text}")
    return "".join(parts) if parts else "0"
