"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from codescore.models.model_artifact import ArtifactBundle
from codescore.models.model_config import ScoringConfig


def write_json(path: Path, data: Any) -> Path:
    """Write a JSON artifact, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def coverage_summary() -> dict:
    """Jest json-summary coverage report."""
    return {
        "total": {
            "lines": {"total": 200, "covered": 160, "skipped": 0, "pct": 80},
            "statements": {"total": 220, "covered": 170, "skipped": 0, "pct": 77.27},
        }
    }


@pytest.fixture
def eslint_report() -> list:
    """ESLint JSON report with three messages across two files."""
    return [
        {
            "filePath": "/repo/src/app.ts",
            "messages": [
                {"ruleId": "no-unused-vars", "severity": 2, "line": 3},
                {"ruleId": "eqeqeq", "severity": 1, "line": 9},
            ],
        },
        {
            "filePath": "/repo/src/items/items.service.ts",
            "messages": [{"ruleId": "no-console", "severity": 1, "line": 12}],
        },
        {"filePath": "/repo/src/main.ts", "messages": []},
    ]


@pytest.fixture
def semgrep_report() -> dict:
    """Semgrep-style report with one finding per severity tier."""
    return {
        "results": [
            {"check_id": "sql-injection", "extra": {"severity": "HIGH"}},
            {"check_id": "weak-hash", "extra": {"severity": "MEDIUM"}},
            {"check_id": "todo-comment", "extra": {"severity": "INFO"}},
        ]
    }


@pytest.fixture
def escomplex_report() -> dict:
    """Complexity report with cyclomatic values nested in several shapes."""
    return {
        "aggregate": {"cyclomatic": 3},
        "functions": [
            {"name": "bootstrap", "cyclomatic": 1},
            {"name": "findAll", "cyclomatic": 5},
        ],
    }


@pytest.fixture
def sonar_export() -> dict:
    """Platform metrics export."""
    return {
        "component": {
            "key": "storefront",
            "measures": [
                {"metric": "code_smells", "value": "10"},
                {"metric": "sqale_index", "value": "50"},
                {"metric": "complexity", "value": "40"},
                {"metric": "duplicated_lines_density", "value": "3.4"},
                {"metric": "reliability_rating", "value": "1.0"},
                {"metric": "security_rating", "value": "3.0"},
            ],
        }
    }


@pytest.fixture
def full_bundle(
    coverage_summary, eslint_report, semgrep_report, escomplex_report, sonar_export
) -> ArtifactBundle:
    """Bundle with every artifact present."""
    return ArtifactBundle(
        coverage=coverage_summary,
        linter=eslint_report,
        security=semgrep_report,
        complexity=escomplex_report,
        platform=sonar_export,
        scorecard={"issuesFound": 4, "issuesFixed": 3, "fixAttempts": 2},
        file_metadata={"total_lines": 1500},
    )


@pytest.fixture
def project_dir(
    temp_dir, coverage_summary, eslint_report, semgrep_report, escomplex_report
) -> Path:
    """Project root with local tool artifacts written to their default paths."""
    write_json(temp_dir / "coverage" / "coverage-summary.json", coverage_summary)
    write_json(temp_dir / "eslint.json", eslint_report)
    write_json(temp_dir / "semgrep.json", semgrep_report)
    write_json(temp_dir / "escomplex.json", escomplex_report)
    write_json(temp_dir / "files_info.json", {"total_lines": 1500})
    return temp_dir


@pytest.fixture
def default_config() -> ScoringConfig:
    """Default scoring configuration."""
    return ScoringConfig()
