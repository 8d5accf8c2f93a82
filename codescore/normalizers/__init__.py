"""Normalizers mapping raw tool output onto the 0-100 norm scale.

One normalizer per signal source:
- Coverage (line coverage percentage)
- Linter (issue density per KLOC)
- Security scan (severity-tiered penalties)
- Complexity (average cyclomatic complexity)
- Platform export (maintainability, performance, duplication, reliability, security)
- Scorecard (verbatim pass-through)

All normalizers are total functions: absent or malformed input yields a
documented default rather than an exception.
"""

from codescore.normalizers.base import clamp_norm, coerce_number, round_half_up
from codescore.normalizers.complexity import (
    find_numeric_leaves,
    is_cyclomatic_key,
    normalize_complexity,
)
from codescore.normalizers.coverage import normalize_coverage
from codescore.normalizers.linter import normalize_linter, read_total_lines
from codescore.normalizers.platform_metrics import normalize_platform, read_platform_measures
from codescore.normalizers.scorecard import SCORECARD_FIELDS, normalize_scorecard
from codescore.normalizers.security import normalize_security

__all__ = [
    # Helpers
    "clamp_norm",
    "coerce_number",
    "round_half_up",
    # Per-source normalizers
    "normalize_complexity",
    "normalize_coverage",
    "normalize_linter",
    "normalize_platform",
    "normalize_scorecard",
    "normalize_security",
    # Source-specific utilities
    "SCORECARD_FIELDS",
    "find_numeric_leaves",
    "is_cyclomatic_key",
    "read_platform_measures",
    "read_total_lines",
]
