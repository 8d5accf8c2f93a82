"""codescore - composite code-quality scoring from static-analysis artifacts."""

__version__ = "0.1.0"
