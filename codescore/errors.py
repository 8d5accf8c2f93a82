"""Exceptions for the fatal failure modes of a scoring run.

Missing or malformed input artifacts are not errors; they degrade to
documented defaults. Only configuration problems and a failed write of the
primary norms artifact abort a run.
"""


class CodescoreError(Exception):
    """Base class for codescore errors."""


class ConfigError(CodescoreError):
    """Raised when a configuration file cannot be read or validated."""


class ReportWriteError(CodescoreError):
    """Raised when the primary norms artifact cannot be written."""
