# gatuple: Geometric Algebra Tuple Engine (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Runtime configuration for the tuple engine.

Centralises the generator cap, the coefficient dtype and the device into
a single :class:`AlgebraConfig` dataclass.

Environment variables (read once, on first access):
    GATUPLE_MAX_GENERATORS  — generator cap, 1..12 (default 9)
    GATUPLE_DTYPE           — torch dtype name (default ``float32``)
    GATUPLE_DEVICE          — ``cpu`` (default), ``cuda``, ``mps`` or ``auto``
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

import torch

from log import get_logger

logger = get_logger(__name__)

#: Hard ceiling on generators; product tables grow as ``4**n``.
GENERATOR_LIMIT = 12

_CONFIG = None


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available accelerator.

    Priority: cuda > mps > cpu.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return "mps"
    return "cpu"


@dataclass(frozen=True)
class AlgebraConfig:
    """Immutable bag of engine settings.

    Attributes:
        max_generators: Number of orthonormal generators ``e1..en`` a blade
            may reference.
        dtype: Name of the torch dtype used for tuple coefficients.
        device: Resolved device string (``cuda``, ``mps``, ``cpu``).
    """

    max_generators: int = 9
    dtype: str = "float32"
    device: str = "cpu"

    def __post_init__(self) -> None:
        if not 1 <= self.max_generators <= GENERATOR_LIMIT:
            raise ValueError(
                f"max_generators must be in 1..{GENERATOR_LIMIT}, "
                f"got {self.max_generators}"
            )
        if not isinstance(getattr(torch, self.dtype, None), torch.dtype):
            raise ValueError(f"Unknown torch dtype: {self.dtype!r}")
        object.__setattr__(self, "device", resolve_device(self.device))

    @property
    def torch_dtype(self) -> torch.dtype:
        return getattr(torch, self.dtype)

    @property
    def max_blade(self) -> int:
        """Mask of the largest representable blade."""
        return (1 << self.max_generators) - 1


def _from_env() -> AlgebraConfig:
    return AlgebraConfig(
        max_generators=int(os.environ.get("GATUPLE_MAX_GENERATORS", 9)),
        dtype=os.environ.get("GATUPLE_DTYPE", "float32"),
        device=os.environ.get("GATUPLE_DEVICE", "cpu"),
    )


def get_config() -> AlgebraConfig:
    """Return the active configuration, loading it from the environment once."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _from_env()
    return _CONFIG


def set_config(**overrides) -> AlgebraConfig:
    """Replace fields of the active configuration.

    Args:
        **overrides: Any :class:`AlgebraConfig` field.

    Returns:
        The new active configuration.
    """
    global _CONFIG
    _CONFIG = replace(get_config(), **overrides)
    logger.debug("Config updated: %s", _CONFIG)
    return _CONFIG


def reset_config() -> AlgebraConfig:
    """Drop overrides and reload from the environment."""
    global _CONFIG
    _CONFIG = None
    return get_config()
