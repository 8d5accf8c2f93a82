"""Coverage normalizer for json-summary coverage reports."""

import logging
from typing import Any

from codescore.normalizers.base import clamp_norm, coerce_number, round_half_up

logger = logging.getLogger(__name__)

# Tools disagree on the name of the percentage field
COVERAGE_PERCENT_KEYS = ("pct", "percentage")


def normalize_coverage(artifact: Any | None) -> int:
    """Extract line coverage as a norm.

    Reads `total.lines.pct` (or `total.lines.percentage`). Missing coverage
    counts as a correctness penalty, so any extraction failure scores 0.

    Args:
        artifact: Parsed coverage summary, or None

    Returns:
        Integer score between 0-100
    """
    lines = _dig(artifact, "total", "lines")
    if not isinstance(lines, dict):
        logger.debug("Coverage summary has no total.lines section")
        return 0

    for key in COVERAGE_PERCENT_KEYS:
        if lines.get(key) is None:
            continue
        pct = coerce_number(lines[key])
        if pct is None:
            logger.debug(f"Coverage value total.lines.{key} is not numeric: {lines[key]!r}")
            return 0
        return round_half_up(clamp_norm(pct))

    return 0


def _dig(data: Any, *keys: str) -> Any | None:
    """Follow nested mapping keys, returning None on any mismatch."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
