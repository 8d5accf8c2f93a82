"""Composite scoring functions for combining norms."""

import math

from codescore.models.model_report import WeightAnalysis


def contributing_norm(value: float | None) -> float:
    """Value a norm contributes to the composite.

    Missing keys and the -1 sentinel (or any negative or non-finite value)
    contribute nothing.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def calculate_composite(
    norms: dict[str, float],
    weights: dict[str, float],
    normalize: bool = False,
) -> float:
    """Calculate the weighted composite score.

    composite = Σ norm[k] × weights[k] / 100, rounded to 2 decimals.

    This is a weighted sum, not a weighted average: if the weights do not
    sum to 100 the result is not bounded to 0-100. With normalize=True the
    divisor is the actual weight sum instead.

    Args:
        norms: Norm table
        weights: Weight per norm key (percent)
        normalize: Divide by the weight sum rather than 100

    Returns:
        Composite score
    """
    divisor = 100.0
    if normalize:
        divisor = float(sum(weights.values()))
        if divisor == 0:
            return 0.0

    total = 0.0
    for key, weight in weights.items():
        total += contributing_norm(norms.get(key)) * (weight / divisor)
    return round(total, 2)


def build_breakdown(norms: dict[str, float], weights: dict[str, float]) -> dict[str, float]:
    """Restrict a norm table to the keys that carry weight.

    Args:
        norms: Norm table
        weights: Weight table

    Returns:
        Norms for weighted keys present in the table, in weight order
    """
    return {key: norms[key] for key in weights if key in norms}


def analyze_weights(weights: dict[str, float]) -> WeightAnalysis:
    """Report whether the composite is on a 0-100 scale.

    Args:
        weights: Weight table

    Returns:
        WeightAnalysis with the weight sum
    """
    total = float(sum(weights.values()))
    return WeightAnalysis(total=total, sums_to_100=abs(total - 100.0) < 0.001)
