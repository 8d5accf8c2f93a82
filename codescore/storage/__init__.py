"""Storage of scoring results.

This module provides:
- ReportWriter: File-based persistence of norms, composite and reports
"""

from codescore.storage.report_writer import ReportWriter

__all__ = [
    "ReportWriter",
]
