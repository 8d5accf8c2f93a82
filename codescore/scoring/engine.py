"""Scoring engine orchestrating normalizers, blending and composition."""

import logging

from codescore.models.model_artifact import ArtifactBundle
from codescore.models.model_config import BlendMode, ScoringConfig
from codescore.models.model_report import ScoreReport
from codescore.normalizers.complexity import normalize_complexity
from codescore.normalizers.coverage import normalize_coverage
from codescore.normalizers.linter import normalize_linter, read_total_lines
from codescore.normalizers.platform_metrics import normalize_platform, read_platform_measures
from codescore.normalizers.scorecard import normalize_scorecard
from codescore.normalizers.security import normalize_security
from codescore.scoring.blender import blend_norms, fill_missing
from codescore.scoring.composite import build_breakdown, calculate_composite

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Turns a bundle of raw artifacts into norms and a composite score.

    Norms are assembled in source order:
    1. Local tool normalizers (coverage, linter, security scan, complexity)
    2. Baseline norms for dimensions no local tool measures
    3. Platform export norms, merged with the configured blend mode
    4. Scorecard values, which always override
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        """Initialize engine.

        Args:
            config: Scoring configuration (defaults if None)
        """
        self.config = config or ScoringConfig()

    def local_norms(self, bundle: ArtifactBundle) -> dict[str, float]:
        """Norms computed from locally run tools."""
        total_lines = read_total_lines(bundle.file_metadata)
        return {
            "correctness": normalize_coverage(bundle.coverage),
            "security": normalize_security(bundle.security),
            "maintainability": normalize_complexity(bundle.complexity),
            "readability": normalize_linter(bundle.linter, total_lines),
        }

    def platform_norms(self, bundle: ArtifactBundle) -> dict[str, float]:
        """Norms derived from the platform export (empty when absent)."""
        if bundle.platform is None:
            return {}

        measures = read_platform_measures(bundle.platform)
        if not measures:
            logger.warning("Platform export contains no measures, skipping")
            return {}
        return normalize_platform(measures, self.config.platform)

    def compute_norms(self, bundle: ArtifactBundle) -> dict[str, float]:
        """Build the full norm table for a run.

        Args:
            bundle: Raw artifacts for this run

        Returns:
            Norm table keyed by dimension
        """
        norms = self.local_norms(bundle)
        norms = fill_missing(norms, self.config.baseline_norms)

        platform = self.platform_norms(bundle)
        if platform:
            logger.info(
                f"Blending {len(platform)} platform norms ({self.config.blend_mode.value})"
            )
            norms = blend_norms(norms, platform, self.config.blend_mode)

        scorecard = normalize_scorecard(bundle.scorecard)
        if scorecard:
            logger.info(f"Applying {len(scorecard)} scorecard values")
            norms = blend_norms(norms, scorecard, BlendMode.OVERRIDE)

        return norms

    def score(self, bundle: ArtifactBundle) -> ScoreReport:
        """Score a run end to end.

        Args:
            bundle: Raw artifacts for this run

        Returns:
            ScoreReport with norms, weights, breakdown and composite
        """
        norms = self.compute_norms(bundle)
        weights = dict(self.config.weights)

        composite = calculate_composite(norms, weights, normalize=self.config.normalize_weights)
        breakdown = build_breakdown(norms, weights)

        return ScoreReport(
            score=composite,
            norms=norms,
            weights=weights,
            breakdown=breakdown,
            blend_mode=self.config.blend_mode,
            sources=[source.value for source in bundle.present_sources()],
        )
