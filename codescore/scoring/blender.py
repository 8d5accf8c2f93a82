"""Blending of norms contributed by more than one source."""

import logging
import math
from typing import Any

from codescore.consts import UNAVAILABLE
from codescore.models.model_config import BlendMode
from codescore.normalizers.base import round_half_up

logger = logging.getLogger(__name__)


def is_finite_number(value: Any) -> bool:
    """True for ints and floats that are finite (booleans excluded)."""
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def blend_value(existing: float | None, incoming: Any, mode: BlendMode) -> float | None:
    """Merge an incoming norm into an existing one.

    Rules:
    - Incoming not a finite number: existing is kept (including -1)
    - Existing absent or -1: incoming is adopted
    - AVERAGE: (existing + incoming) / 2, rounded half up
    - OVERRIDE: incoming

    Args:
        existing: Current norm, None if the key is not populated
        incoming: Norm from the secondary source
        mode: Blend policy

    Returns:
        The merged norm
    """
    if not is_finite_number(incoming):
        return existing
    if existing is None or existing == UNAVAILABLE:
        return incoming
    if mode == BlendMode.OVERRIDE:
        return incoming
    return round_half_up((existing + incoming) / 2)


def blend_norms(
    base: dict[str, float],
    incoming: dict[str, Any],
    mode: BlendMode,
) -> dict[str, float]:
    """Blend a whole norm table into another.

    Args:
        base: Existing norms (not modified)
        incoming: Norms from the secondary source
        mode: Blend policy

    Returns:
        New norm table with every incoming key merged
    """
    merged = dict(base)
    for key, value in incoming.items():
        result = blend_value(merged.get(key), value, mode)
        if result is None:
            logger.debug(f"Skipping non-numeric norm for {key}: {value!r}")
            continue
        merged[key] = result
    return merged


def fill_missing(base: dict[str, float], defaults: dict[str, float]) -> dict[str, float]:
    """Add default norms for keys the base table does not have."""
    merged = dict(base)
    for key, value in defaults.items():
        merged.setdefault(key, value)
    return merged
