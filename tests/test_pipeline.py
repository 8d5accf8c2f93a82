"""End-to-end tests for the scoring pipeline."""

import json
from pathlib import Path

import pytest

from codescore.errors import ReportWriteError
from codescore.models.model_config import BlendMode, OutputOptions, ScoringConfig
from codescore.pipeline import load_last_report, run_scoring_pipeline

from conftest import write_json


def read_norms(directory: Path) -> dict:
    return json.loads((directory / "norms.json").read_text(encoding="utf-8"))


class TestScoringPipeline:
    """Tests for run_scoring_pipeline."""

    def test_no_inputs_degraded_run(self, temp_dir: Path) -> None:
        report, written = run_scoring_pipeline(root_dir=temp_dir)

        norms = read_norms(temp_dir)
        assert norms["correctness"] == 0
        assert norms["readability"] == 100
        assert norms["security"] == 100
        assert norms["maintainability"] == 100
        assert report.sources == []
        assert set(written) == {"norms", "composite", "breakdown", "report"}

    def test_scorecard_only(self, temp_dir: Path) -> None:
        write_json(temp_dir / "scorecard.json", {"issuesFound": 3, "issuesFixed": 2, "fixAttempts": 1})

        run_scoring_pipeline(root_dir=temp_dir)

        norms = read_norms(temp_dir)
        assert norms["issuesFound"] == 3
        assert norms["issuesFixed"] == 2
        assert norms["fixAttempts"] == 1

    def test_integer_norms_written_as_integers(self, temp_dir: Path) -> None:
        write_json(temp_dir / "scorecard.json", {"issuesFound": 3, "fixAttempts": 1})

        run_scoring_pipeline(root_dir=temp_dir)

        text = (temp_dir / "norms.json").read_text(encoding="utf-8")
        assert '"issuesFound": 3,' in text
        assert ".0" not in text
        norms = read_norms(temp_dir)
        assert isinstance(norms["issuesFound"], int)
        assert isinstance(norms["correctness"], int)
        assert isinstance(norms["robustness"], int)

    def test_full_project(self, project_dir: Path, sonar_export) -> None:
        write_json(project_dir / "sonar_metrics.json", sonar_export)

        report, _ = run_scoring_pipeline(root_dir=project_dir)

        norms = read_norms(project_dir)
        assert norms["correctness"] == 80
        assert norms["readability"] == 84
        assert norms["security"] == 54
        assert norms["reliability"] == 100
        assert (project_dir / "composite_score.txt").read_text() == str(report.score)

        breakdown = json.loads((project_dir / "breakdown.json").read_text())
        assert "reliability" not in breakdown  # not weighted
        assert breakdown["correctness"] == 80

    def test_override_mode(self, project_dir: Path, sonar_export) -> None:
        write_json(project_dir / "sonar_metrics.json", sonar_export)
        config = ScoringConfig(blend_mode=BlendMode.OVERRIDE)

        run_scoring_pipeline(root_dir=project_dir, config=config)

        assert read_norms(project_dir)["security"] == 50

    def test_corrupt_input_degrades(self, project_dir: Path) -> None:
        (project_dir / "coverage" / "coverage-summary.json").write_text("{", encoding="utf-8")

        report, _ = run_scoring_pipeline(root_dir=project_dir)

        assert report.norms["correctness"] == 0
        assert report.norms["readability"] == 84

    def test_separate_output_dir(self, project_dir: Path, temp_dir: Path) -> None:
        out = project_dir / "reports"
        run_scoring_pipeline(root_dir=project_dir, output_dir=out)

        assert (out / "norms.json").exists()
        assert not (project_dir / "norms.json").exists()

    def test_legacy_mirror(self, temp_dir: Path) -> None:
        config = ScoringConfig(outputs=OutputOptions(legacy_norms_path="metrics/norms.json"))
        _, written = run_scoring_pipeline(root_dir=temp_dir, config=config)

        assert written["legacy"] == temp_dir / "metrics" / "norms.json"
        assert json.loads(written["legacy"].read_text()) == read_norms(temp_dir)

    def test_primary_write_failure(self, temp_dir: Path) -> None:
        blocker = temp_dir / "out"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(ReportWriteError):
            run_scoring_pipeline(root_dir=temp_dir, output_dir=blocker)

    def test_load_last_report(self, temp_dir: Path) -> None:
        assert load_last_report(temp_dir) is None
        report, _ = run_scoring_pipeline(root_dir=temp_dir)

        loaded = load_last_report(temp_dir)
        assert loaded is not None
        assert loaded.score == report.score
