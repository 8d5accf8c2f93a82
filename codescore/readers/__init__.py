"""Readers for input artifacts and configuration."""

from codescore.readers.artifact_reader import load_artifacts, read_artifact, resolve_path
from codescore.readers.config_loader import find_config, load_config

__all__ = [
    "find_config",
    "load_artifacts",
    "load_config",
    "read_artifact",
    "resolve_path",
]
