"""Complexity normalizer over arbitrarily shaped complexity reports."""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from codescore.consts import COMPLEXITY_KEY_FRAGMENT, COMPLEXITY_PENALTY_PER_POINT
from codescore.normalizers.base import clamp_norm, round_half_up

logger = logging.getLogger(__name__)

KeyPredicate = Callable[[str], bool]


def is_cyclomatic_key(key: str) -> bool:
    """Default predicate: key mentions cyclomatic complexity."""
    return COMPLEXITY_KEY_FRAGMENT in key.lower()


def find_numeric_leaves(node: Any, predicate: KeyPredicate) -> Iterator[float]:
    """Walk a JSON tree and yield numbers stored under matching keys.

    Mappings and lists are descended into; scalars end the walk. A matching
    key holding a container is descended into like any other.

    Args:
        node: Any parsed JSON value
        predicate: Test applied to each mapping key

    Yields:
        Numeric values (booleans excluded) under keys the predicate accepts
    """
    if isinstance(node, dict):
        for key, value in node.items():
            if (
                predicate(str(key))
                and isinstance(value, (int, float))
                and not isinstance(value, bool)
            ):
                yield float(value)
            elif isinstance(value, (dict, list)):
                yield from find_numeric_leaves(value, predicate)
    elif isinstance(node, list):
        for item in node:
            yield from find_numeric_leaves(item, predicate)


def average_complexity(artifact: Any | None, predicate: KeyPredicate = is_cyclomatic_key) -> float:
    """Average of all sampled complexity values (1 when none are found)."""
    values = list(find_numeric_leaves(artifact, predicate))
    if not values:
        return 1.0
    return sum(values) / len(values)


def normalize_complexity(
    artifact: Any | None,
    predicate: KeyPredicate = is_cyclomatic_key,
) -> int:
    """Score average cyclomatic complexity.

    Algorithm:
        score = 100 - 5 × (avg - 1), clamped to 0-100
        Missing report: 100

    Args:
        artifact: Parsed complexity report, or None
        predicate: Selects which keys are sampled

    Returns:
        Integer score between 0-100
    """
    if artifact is None:
        return 100

    avg = average_complexity(artifact, predicate)
    logger.debug(f"Complexity: average {avg:.2f}")

    return round_half_up(clamp_norm(100 - COMPLEXITY_PENALTY_PER_POINT * (avg - 1)))
