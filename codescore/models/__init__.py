"""Pydantic models for codescore."""

from codescore.models.model_artifact import ArtifactBundle, ArtifactSource
from codescore.models.model_config import (
    ArtifactPaths,
    BlendMode,
    OutputOptions,
    PlatformCoefficients,
    ScoringConfig,
)
from codescore.models.model_report import ScoreReport, WeightAnalysis

__all__ = [
    # Artifact models
    "ArtifactBundle",
    "ArtifactSource",
    # Configuration models
    "ArtifactPaths",
    "BlendMode",
    "OutputOptions",
    "PlatformCoefficients",
    "ScoringConfig",
    # Report models
    "ScoreReport",
    "WeightAnalysis",
]
