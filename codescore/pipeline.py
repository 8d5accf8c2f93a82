"""Pipeline orchestration for a scoring run.

This module coordinates all steps of a run:
1. Read input artifacts (missing or corrupt ones become None)
2. Normalize each source onto the 0-100 scale
3. Blend platform and scorecard norms into the local ones
4. Compute the composite score and breakdown
5. Write the norms artifact and any configured secondary artifacts
"""

import logging
from datetime import UTC, datetime
from pathlib import Path

from codescore.consts import DEFAULT_ROOT_DIR
from codescore.models.model_config import ScoringConfig
from codescore.models.model_report import ScoreReport
from codescore.readers.artifact_reader import load_artifacts
from codescore.scoring.engine import ScoringEngine
from codescore.storage.report_writer import ReportWriter

logger = logging.getLogger(__name__)


def run_scoring_pipeline(
    root_dir: Path | str = DEFAULT_ROOT_DIR,
    output_dir: Path | str | None = None,
    config: ScoringConfig | None = None,
) -> tuple[ScoreReport, dict[str, Path]]:
    """Run full pipeline: read → normalize → blend → compose → write.

    Args:
        root_dir: Directory input artifact paths are resolved against.
        output_dir: Directory for output artifacts. Uses root_dir if None.
        config: Scoring configuration. Uses defaults if None.

    Returns:
        Tuple of (report, written) where written maps artifact names to
        the paths that were successfully written.

    Raises:
        ReportWriteError: If the norms artifact cannot be written.
    """
    config = config or ScoringConfig()
    root_dir = Path(root_dir)
    output_dir = Path(output_dir) if output_dir else root_dir

    logger.info(f"Starting scoring run in {root_dir.resolve()}")
    start_time = datetime.now(UTC)

    # 1. Read
    bundle = load_artifacts(config.paths, root_dir)

    # 2-4. Normalize, blend, compose
    engine = ScoringEngine(config)
    report = engine.score(bundle)

    # 5. Write
    writer = ReportWriter(output_dir, config.outputs)
    written = writer.save_all(report)

    duration = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(f"Scoring complete in {duration:.2f}s: composite {report.score}")

    return report, written


def load_last_report(output_dir: Path | str = DEFAULT_ROOT_DIR) -> ScoreReport | None:
    """Load the report written by a previous run, if any."""
    return ReportWriter(output_dir).load_report()
