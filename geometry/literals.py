# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Shorthand constructors for graded elements.

Each basis blade gets a constructor named after its generators::

    >>> 2.5 * E13
    GradedElement(e1^e3, 2.5)
    >>> E1(3.0) + E23(1.0)          # tuple bounded at e1^e2^e3
    >>> literal("10_e1_e2")         # the suffix spelling, e.g. from config files
    GradedElement(e1^e2, 10.0)

``E1`` .. ``E9`` exist for every generator, and every blade of e1..e5
has one as well (``E12``, ``E135``, ``E12345``, ...).
"""

import itertools
import re

from algebra.blade import SCALAR, Blade
from algebra.element import GradedElement, is_number

_TOKEN = re.compile(r"e(\d+)")
_LITERAL = re.compile(r"^(?P<value>.+?)_(?P<blade>e\d.*)$")


class BasisElement:
    """Constructor for elements on one fixed blade.

    Calling it or multiplying a number by it yields a
    :class:`GradedElement`.
    """

    __slots__ = ("blade",)

    def __init__(self, blade):
        self.blade = blade if isinstance(blade, Blade) else Blade(blade)

    def __call__(self, value=1.0) -> GradedElement:
        return GradedElement(self.blade, value)

    def __rmul__(self, value):
        if is_number(value):
            return GradedElement(self.blade, value)
        return NotImplemented

    def __repr__(self):
        return f"BasisElement({self.blade!r})"


def basis(*generators: int) -> BasisElement:
    """Constructor for the blade of the given generator indices."""
    return BasisElement(Blade.from_generators(*generators))


def parse_blade(text: str) -> Blade:
    """Parse a blade name.

    Accepts ``e1_e2``, ``e1^e2``, ``e1 e2`` and the compact ``e12``
    (single-digit generators only). ``""``, ``"1"`` and ``"scalar"`` are
    the scalar. Generators must be listed in ascending order.
    """
    text = text.strip().strip("_")
    if text in ("", "1", "scalar"):
        return SCALAR
    tokens = [t for t in re.split(r"[_^\s]+", text) if t]
    indices = []
    for token in tokens:
        match = _TOKEN.fullmatch(token)
        if match is None:
            raise ValueError(f"Cannot parse blade token {token!r} in {text!r}")
        digits = match.group(1)
        if len(tokens) == 1 and len(digits) > 1:
            indices.extend(int(d) for d in digits)
        else:
            indices.append(int(digits))
    if indices != sorted(indices):
        raise ValueError(f"Generators must be ascending in {text!r}")
    return Blade.from_generators(*indices)


def literal(text: str) -> GradedElement:
    """Parse ``"<value>_<blade>"`` (e.g. ``"2.5_e1_e3"``) into an element.

    A bare number is a scalar element.
    """
    text = text.strip()
    match = _LITERAL.match(text)
    if match is None:
        return GradedElement(SCALAR, float(text))
    return GradedElement(parse_blade(match.group("blade")), float(match.group("value")))


def _constructor_name(blade: Blade) -> str:
    return "E" + "".join(str(k) for k in blade.generators)


CONSTRUCTORS = {}

for _k in range(1, 10):
    _blade = Blade._unchecked(1 << (_k - 1))
    CONSTRUCTORS[_constructor_name(_blade)] = BasisElement(_blade)

for _r in range(2, 6):
    for _combo in itertools.combinations(range(1, 6), _r):
        _blade = Blade._unchecked(sum(1 << (k - 1) for k in _combo))
        CONSTRUCTORS[_constructor_name(_blade)] = BasisElement(_blade)

globals().update(CONSTRUCTORS)
del _k, _r, _combo, _blade

__all__ = ["BasisElement", "basis", "parse_blade", "literal", "CONSTRUCTORS"] + list(CONSTRUCTORS)
