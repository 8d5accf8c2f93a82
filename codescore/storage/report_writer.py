"""File-based persistence of scoring results.

Writes, under the output directory:
    {output_dir}/
    ├── norms.json             # Flat norm table (primary, always written)
    ├── composite_score.txt    # Composite score as plain text
    ├── breakdown.json         # Norms restricted to weighted keys
    ├── score_report.json      # Norms + weights + composite + timestamp
    └── {legacy_norms_path}    # Optional extra copy of norms.json

Only a failure to write norms.json aborts the run; the rest are logged.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from codescore.consts import (
    BREAKDOWN_FILENAME,
    COMPOSITE_FILENAME,
    NORMS_FILENAME,
    REPORT_FILENAME,
)
from codescore.errors import ReportWriteError
from codescore.models.model_config import OutputOptions
from codescore.models.model_report import ScoreReport

logger = logging.getLogger(__name__)


class ReportWriter:
    """Persists norms, composite, breakdown and report artifacts."""

    def __init__(self, output_dir: Path | str, options: OutputOptions | None = None):
        """Initialize ReportWriter.

        Args:
            output_dir: Directory all artifacts are written to.
            options: Which secondary artifacts to write (defaults if None).
        """
        self.output_dir = Path(output_dir)
        self.options = options or OutputOptions()

    @property
    def norms_path(self) -> Path:
        return self.output_dir / NORMS_FILENAME

    @property
    def composite_path(self) -> Path:
        return self.output_dir / COMPOSITE_FILENAME

    @property
    def breakdown_path(self) -> Path:
        return self.output_dir / BREAKDOWN_FILENAME

    @property
    def report_path(self) -> Path:
        return self.output_dir / REPORT_FILENAME

    def _write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def _write_secondary(self, path: Path, content: str, label: str) -> Path | None:
        """Write a non-essential artifact, logging instead of raising."""
        try:
            self._write(path, content)
        except OSError as e:
            logger.warning(f"Failed to write {label} {path}: {e}")
            return None
        logger.info(f"Saved {label}: {path}")
        return path

    # === PRIMARY ===

    def save_norms(self, norms: dict[str, float]) -> Path:
        """Write the norm table.

        Args:
            norms: Norm table.

        Returns:
            Path to the saved file.

        Raises:
            ReportWriteError: If the file cannot be written.
        """
        try:
            self._write(self.norms_path, json.dumps(norms, indent=2))
        except OSError as e:
            raise ReportWriteError(f"Failed to write norms {self.norms_path}: {e}") from e
        logger.info(f"Saved norms: {self.norms_path} ({len(norms)} keys)")
        return self.norms_path

    # === SECONDARY ===

    def save_composite(self, score: float) -> Path | None:
        """Write the composite score as plain text."""
        return self._write_secondary(self.composite_path, str(score), "composite score")

    def save_breakdown(self, breakdown: dict[str, float]) -> Path | None:
        """Write the weighted-key breakdown."""
        return self._write_secondary(
            self.breakdown_path, json.dumps(breakdown, indent=2), "breakdown"
        )

    def save_report(self, report: ScoreReport) -> Path | None:
        """Write the full report bundle."""
        return self._write_secondary(
            self.report_path, report.model_dump_json(indent=2), "report"
        )

    def save_legacy_mirror(self, norms: dict[str, float]) -> Path | None:
        """Write the extra norms copy, if one is configured."""
        if not self.options.legacy_norms_path:
            return None
        path = self.output_dir / self.options.legacy_norms_path
        return self._write_secondary(path, json.dumps(norms, indent=2), "legacy norms")

    def save_all(self, report: ScoreReport) -> dict[str, Path]:
        """Write every configured artifact for a report.

        The norms artifact is written first; if it fails nothing else is
        written.

        Args:
            report: Result of a scoring run.

        Returns:
            Mapping of artifact name to the path actually written.

        Raises:
            ReportWriteError: If the norms artifact cannot be written.
        """
        written = {"norms": self.save_norms(report.norms)}

        secondary: list[tuple[str, Path | None]] = []
        if self.options.composite:
            secondary.append(("composite", self.save_composite(report.score)))
        if self.options.breakdown:
            secondary.append(("breakdown", self.save_breakdown(report.breakdown)))
        if self.options.report:
            secondary.append(("report", self.save_report(report)))
        secondary.append(("legacy", self.save_legacy_mirror(report.norms)))

        for name, path in secondary:
            if path is not None:
                written[name] = path
        return written

    # === LOADING ===

    def load_report(self) -> ScoreReport | None:
        """Load a previously written report.

        Returns:
            ScoreReport if found and valid, None otherwise.
        """
        if not self.report_path.exists():
            logger.warning(f"Report not found: {self.report_path}")
            return None
        try:
            data = json.loads(self.report_path.read_text(encoding="utf-8"))
            return ScoreReport.model_validate(data)
        except (json.JSONDecodeError, OSError, ValidationError) as e:
            logger.warning(f"Failed to read report {self.report_path}: {e}")
            return None
