# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Core kernel of the tuple engine.

Provides basis blades, the product sign/grade rule, graded elements,
multivector tuples, configuration and range checks.
"""

from .config import AlgebraConfig, get_config, set_config, reset_config, resolve_device
from .validation import GATupleError, BladeRangeError, NarrowingError
from .blade import (
    Blade,
    grade,
    combine_max,
    combine_product,
    pseudoscalar,
    SCALAR,
    e1, e2, e3, e4, e5, e6, e7, e8, e9,
)
from .rules import (
    GEOMETRIC,
    INNER,
    OUTER,
    product_sign,
    outer_nonzero,
    inner_nonzero,
    blade_product,
    product_table,
)
from .element import GradedElement
from .multivector import Multivector
from .formatting import format_blade, format_element, format_multivector

__all__ = [
    # config / errors
    "AlgebraConfig",
    "get_config",
    "set_config",
    "reset_config",
    "resolve_device",
    "GATupleError",
    "BladeRangeError",
    "NarrowingError",
    # blades
    "Blade",
    "grade",
    "combine_max",
    "combine_product",
    "pseudoscalar",
    "SCALAR",
    "e1", "e2", "e3", "e4", "e5", "e6", "e7", "e8", "e9",
    # rules
    "GEOMETRIC",
    "INNER",
    "OUTER",
    "product_sign",
    "outer_nonzero",
    "inner_nonzero",
    "blade_product",
    "product_table",
    # values
    "GradedElement",
    "Multivector",
    # formatting
    "format_blade",
    "format_element",
    "format_multivector",
]
