"""Normalizer for a code-quality platform's metrics export.

The export looks like::

    {"component": {"measures": [{"metric": "code_smells", "value": "12"}, ...]}}

Each norm is derived independently from the flattened measures. A measure
missing from the export counts as 0 in the formulas below; this is not the
same as the -1 "unavailable" sentinel, which never comes out of this module.
"""

import logging
from typing import Any

from codescore.consts import PLATFORM_WORST_RATING
from codescore.models.model_config import PlatformCoefficients
from codescore.normalizers.base import clamp_norm, coerce_number, round_half_up

logger = logging.getLogger(__name__)

# Technical debt in minutes; older exports used the alias
DEBT_METRICS = ("sqale_index", "technical_debt")


def read_platform_measures(artifact: Any | None) -> dict[str, Any]:
    """Flatten `component.measures` into a metric → value mapping.

    Args:
        artifact: Parsed platform export, or None

    Returns:
        Raw measure values keyed by metric name (empty on any shape mismatch)
    """
    if not isinstance(artifact, dict):
        return {}
    component = artifact.get("component")
    if not isinstance(component, dict):
        return {}
    measures = component.get("measures")
    if not isinstance(measures, list):
        logger.warning("Platform export has no component.measures list")
        return {}

    out: dict[str, Any] = {}
    for measure in measures:
        if not isinstance(measure, dict) or "metric" not in measure:
            logger.debug(f"Skipping malformed platform measure: {measure!r}")
            continue
        out[str(measure["metric"])] = measure.get("value")
    return out


def measure_value(measures: dict[str, Any], *metrics: str) -> float:
    """Numeric value of the first present metric, 0 if none is usable."""
    for metric in metrics:
        if metric in measures:
            value = coerce_number(measures[metric])
            if value is None:
                logger.debug(f"Platform measure {metric} is not numeric: {measures[metric]!r}")
                return 0.0
            return value
    return 0.0


def rating_to_norm(rating: float) -> float:
    """Invert a 1 (best) to 5 (worst) rating onto 100 to 0."""
    return clamp_norm(((PLATFORM_WORST_RATING - rating) / (PLATFORM_WORST_RATING - 1)) * 100)


def normalize_platform(
    measures: dict[str, Any],
    coefficients: PlatformCoefficients | None = None,
) -> dict[str, float]:
    """Derive norms from platform measures.

    Algorithm:
        maintainability = 100 - smell_penalty×code_smells - debt_penalty×debt_minutes
        performance     = 100 - complexity
        duplication     = 100 - duplicated_lines_density, rounded half up
        reliability     = ((5 - reliability_rating) / 4) × 100
        security        = ((5 - security_rating) / 4) × 100
        correctness     = coverage, rounded half up (only if the measure exists)
        Every norm is clamped to 0-100.

    Args:
        measures: Flattened measures from read_platform_measures
        coefficients: Maintainability penalties (defaults if None)

    Returns:
        Norms keyed by dimension
    """
    coefficients = coefficients or PlatformCoefficients()

    smells = measure_value(measures, "code_smells")
    debt_minutes = measure_value(measures, *DEBT_METRICS)
    complexity = measure_value(measures, "complexity")
    duplicated = measure_value(measures, "duplicated_lines_density")

    maintainability = clamp_norm(
        100 - coefficients.smell_penalty * smells - coefficients.debt_penalty * debt_minutes
    )

    norms = {
        "maintainability": maintainability,
        "performance": clamp_norm(100 - complexity),
        "duplication": round_half_up(clamp_norm(100 - duplicated)),
        "reliability": rating_to_norm(measure_value(measures, "reliability_rating")),
        "security": rating_to_norm(measure_value(measures, "security_rating")),
    }
    if "coverage" in measures:
        norms["correctness"] = round_half_up(clamp_norm(measure_value(measures, "coverage")))
    return norms
