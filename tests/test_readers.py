"""Tests for artifact and configuration readers."""

import logging
from pathlib import Path

import pytest

from codescore.errors import ConfigError
from codescore.models.model_artifact import ArtifactSource
from codescore.models.model_config import ArtifactPaths, BlendMode
from codescore.readers.artifact_reader import load_artifacts, read_artifact, resolve_path
from codescore.readers.config_loader import find_config, load_config

from conftest import write_json


class TestReadArtifact:
    """Tests for read_artifact."""

    def test_reads_json(self, temp_dir: Path) -> None:
        path = write_json(temp_dir / "eslint.json", [{"messages": []}])
        assert read_artifact(path) == [{"messages": []}]

    def test_missing_file(self, temp_dir: Path) -> None:
        assert read_artifact(temp_dir / "missing.json") is None

    def test_corrupt_json_logs_warning(self, temp_dir: Path, caplog) -> None:
        path = temp_dir / "semgrep.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert read_artifact(path) is None

        assert "semgrep.json" in caplog.text

    def test_undecodable_bytes(self, temp_dir: Path) -> None:
        path = temp_dir / "escomplex.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert read_artifact(path) is None

    def test_directory_instead_of_file(self, temp_dir: Path) -> None:
        (temp_dir / "sonar_metrics.json").mkdir()
        assert read_artifact(temp_dir / "sonar_metrics.json") is None

    def test_resolve_path(self, temp_dir: Path) -> None:
        assert resolve_path("eslint.json", temp_dir) == temp_dir / "eslint.json"
        absolute = temp_dir / "elsewhere.json"
        assert resolve_path(str(absolute), "/unused") == absolute


class TestLoadArtifacts:
    """Tests for load_artifacts."""

    def test_loads_default_paths(self, project_dir: Path) -> None:
        bundle = load_artifacts(ArtifactPaths(), project_dir)

        assert bundle.coverage["total"]["lines"]["pct"] == 80
        assert bundle.file_metadata == {"total_lines": 1500}
        assert bundle.platform is None
        assert bundle.scorecard is None
        assert set(bundle.present_sources()) == {
            ArtifactSource.COVERAGE,
            ArtifactSource.LINTER,
            ArtifactSource.SECURITY,
            ArtifactSource.COMPLEXITY,
            ArtifactSource.FILE_METADATA,
        }

    def test_empty_directory(self, temp_dir: Path) -> None:
        bundle = load_artifacts(ArtifactPaths(), temp_dir)
        assert bundle.present_sources() == []

    def test_custom_paths(self, temp_dir: Path) -> None:
        write_json(temp_dir / "reports" / "card.json", {"issuesFound": 1})
        bundle = load_artifacts(ArtifactPaths(scorecard="reports/card.json"), temp_dir)
        assert bundle.get(ArtifactSource.SCORECARD) == {"issuesFound": 1}

    def test_corrupt_artifact_is_absent(self, project_dir: Path) -> None:
        (project_dir / "eslint.json").write_text("[{", encoding="utf-8")
        bundle = load_artifacts(ArtifactPaths(), project_dir)
        assert bundle.linter is None
        assert bundle.coverage is not None


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_defaults_when_no_file(self) -> None:
        config = load_config(None)
        assert config.blend_mode == BlendMode.AVERAGE
        assert sum(config.weights.values()) == 100

    def test_loads_file(self, temp_dir: Path) -> None:
        path = write_json(
            temp_dir / "codescore.json",
            {
                "blend_mode": "override",
                "weights": {"correctness": 40, "security": 40},
                "platform": {"smell_penalty": 0.2},
                "outputs": {"breakdown": False},
            },
        )
        config = load_config(path)

        assert config.blend_mode == BlendMode.OVERRIDE
        assert config.weights == {"correctness": 40, "security": 40}
        assert config.platform.smell_penalty == 0.2
        assert config.platform.debt_penalty == 0.2
        assert not config.outputs.breakdown

    def test_missing_explicit_file(self, temp_dir: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(temp_dir / "nope.json")

    def test_invalid_json(self, temp_dir: Path) -> None:
        path = temp_dir / "codescore.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(path)

    def test_invalid_values(self, temp_dir: Path) -> None:
        path = write_json(temp_dir / "codescore.json", {"weights": {"security": -5}})
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_find_config_precedence(self, temp_dir: Path, monkeypatch) -> None:
        monkeypatch.delenv("CODESCORE_CONFIG", raising=False)
        assert find_config(temp_dir) is None

        default_path = write_json(temp_dir / "codescore.json", {})
        assert find_config(temp_dir) == default_path

        monkeypatch.setenv("CODESCORE_CONFIG", str(temp_dir / "env.json"))
        assert find_config(temp_dir) == temp_dir / "env.json"

        assert find_config(temp_dir, temp_dir / "cli.json") == temp_dir / "cli.json"
