"""Linter normalizer based on issue density per thousand lines."""

import logging
from typing import Any

from codescore.consts import LINTER_PENALTY_PER_KLOC, MIN_KLOC
from codescore.normalizers.base import clamp_norm, coerce_number, round_half_up

logger = logging.getLogger(__name__)


def count_lint_messages(artifact: Any | None) -> int:
    """Count diagnostic messages across all files of a linter report.

    Args:
        artifact: List of per-file entries, each with a `messages` list

    Returns:
        Total number of messages (0 for any other shape)
    """
    if not isinstance(artifact, list):
        return 0

    total = 0
    for entry in artifact:
        if not isinstance(entry, dict):
            continue
        messages = entry.get("messages")
        if isinstance(messages, list):
            total += len(messages)
    return total


def read_total_lines(file_metadata: Any | None) -> float:
    """Read `total_lines` from the file-metadata artifact (0 if unavailable)."""
    if not isinstance(file_metadata, dict):
        return 0.0
    total_lines = coerce_number(file_metadata.get("total_lines"))
    if total_lines is None or total_lines < 0:
        return 0.0
    return total_lines


def normalize_linter(artifact: Any | None, total_lines: float = 0) -> int:
    """Score lint findings by density.

    Algorithm:
        kloc = max(0.001, total_lines / 1000)
        score = 100 - (messages / kloc) * 8, clamped to 0-100

    A missing report is assumed clean and scores 100.

    Args:
        artifact: Parsed linter report, or None
        total_lines: Source line count of the project

    Returns:
        Integer score between 0-100
    """
    if artifact is None:
        return 100

    messages = count_lint_messages(artifact)
    kloc = max(MIN_KLOC, total_lines / 1000)
    issues_per_kloc = messages / kloc
    logger.debug(f"Linter: {messages} messages over {kloc:.3f} KLOC")

    return round_half_up(clamp_norm(100 - issues_per_kloc * LINTER_PENALTY_PER_KLOC))
