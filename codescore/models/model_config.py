"""Configuration models for a scoring run."""

import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from codescore.consts import (
    COMPLEXITY_REPORT_PATH,
    COVERAGE_SUMMARY_PATH,
    DEFAULT_BASELINE_NORMS,
    DEFAULT_WEIGHTS,
    FILE_METADATA_PATH,
    LINTER_REPORT_PATH,
    PLATFORM_DEBT_PENALTY,
    PLATFORM_METRICS_PATH,
    PLATFORM_SMELL_PENALTY,
    SCORECARD_PATH,
    SECURITY_REPORT_PATH,
)
from codescore.models.model_artifact import ArtifactSource


class BlendMode(str, Enum):
    """How a second source's norm is merged into an existing one."""

    AVERAGE = "average"
    OVERRIDE = "override"


class PlatformCoefficients(BaseModel):
    """Tunable penalties for platform-derived maintainability."""

    smell_penalty: float = Field(
        default=PLATFORM_SMELL_PENALTY, ge=0.0, description="Points lost per code smell"
    )
    debt_penalty: float = Field(
        default=PLATFORM_DEBT_PENALTY, ge=0.0, description="Points lost per minute of debt"
    )


class ArtifactPaths(BaseModel):
    """Artifact locations, relative to the project root unless absolute."""

    coverage: str = COVERAGE_SUMMARY_PATH
    linter: str = LINTER_REPORT_PATH
    security: str = SECURITY_REPORT_PATH
    complexity: str = COMPLEXITY_REPORT_PATH
    platform: str = PLATFORM_METRICS_PATH
    scorecard: str = SCORECARD_PATH
    file_metadata: str = FILE_METADATA_PATH

    def for_source(self, source: ArtifactSource) -> str:
        """Return the configured path for a source."""
        return getattr(self, source.value)


class OutputOptions(BaseModel):
    """Which secondary artifacts the report writer emits.

    The norms artifact is always written.
    """

    composite: bool = Field(default=True, description="Write composite_score.txt")
    breakdown: bool = Field(default=True, description="Write breakdown.json")
    report: bool = Field(default=True, description="Write score_report.json")
    legacy_norms_path: str | None = Field(
        default=None, description="Extra copy of the norms, relative to the output dir"
    )


class ScoringConfig(BaseModel):
    """Full configuration of a scoring run."""

    blend_mode: BlendMode = BlendMode.AVERAGE
    weights: dict[str, int | float] = Field(default_factory=lambda: dict(DEFAULT_WEIGHTS))
    baseline_norms: dict[str, int | float] = Field(
        default_factory=lambda: dict(DEFAULT_BASELINE_NORMS),
        description="Norms for dimensions no local tool measures",
    )
    normalize_weights: bool = Field(
        default=False,
        description="Divide by the weight sum instead of 100 when composing",
    )
    platform: PlatformCoefficients = Field(default_factory=PlatformCoefficients)
    paths: ArtifactPaths = Field(default_factory=ArtifactPaths)
    outputs: OutputOptions = Field(default_factory=OutputOptions)

    @field_validator("weights")
    @classmethod
    def weights_non_negative(cls, value: dict[str, int | float]) -> dict[str, int | float]:
        """Reject negative or non-finite weights."""
        for key, weight in value.items():
            if not math.isfinite(weight) or weight < 0:
                msg = f"Weight for '{key}' must be a non-negative number, got {weight}"
                raise ValueError(msg)
        return value

    @field_validator("baseline_norms")
    @classmethod
    def baseline_in_range(cls, value: dict[str, int | float]) -> dict[str, int | float]:
        """Baseline norms must already be on the 0-100 scale."""
        for key, norm in value.items():
            if not 0.0 <= norm <= 100.0:
                msg = f"Baseline norm for '{key}' must be within 0-100, got {norm}"
                raise ValueError(msg)
        return value
