from pathlib import Path

DEFAULT_ROOT_DIR = Path(".")
DEFAULT_CONFIG_FILENAME = "codescore.json"
CONFIG_ENV_VAR = "CODESCORE_CONFIG"

# Input artifacts, relative to the project root
COVERAGE_SUMMARY_PATH = "coverage/coverage-summary.json"  # jest json-summary
LINTER_REPORT_PATH = "eslint.json"
SECURITY_REPORT_PATH = "semgrep.json"
COMPLEXITY_REPORT_PATH = "escomplex.json"
FILE_METADATA_PATH = "files_info.json"
PLATFORM_METRICS_PATH = "sonar_metrics.json"
SCORECARD_PATH = "scorecard.json"

# Output artifacts, relative to the output directory
NORMS_FILENAME = "norms.json"  # Primary artifact, write failure is fatal
COMPOSITE_FILENAME = "composite_score.txt"
BREAKDOWN_FILENAME = "breakdown.json"
REPORT_FILENAME = "score_report.json"

# Sentinel for "not computed this run"
UNAVAILABLE = -1

# Linter normalization
LINTER_PENALTY_PER_KLOC = 8
MIN_KLOC = 0.001

# Security scan penalties by severity tier
SECURITY_PENALTY_SEVERE = 30  # CRITICAL / HIGH
SECURITY_PENALTY_MEDIUM = 10
SECURITY_PENALTY_OTHER = 2  # LOW / INFO / unknown
SECURITY_SEVERE_LEVELS = ("CRITICAL", "HIGH")
SECURITY_MEDIUM_LEVELS = ("MEDIUM",)
SECURITY_DEFAULT_SEVERITY = "INFO"

# Complexity normalization
COMPLEXITY_KEY_FRAGMENT = "cyclomatic"
COMPLEXITY_PENALTY_PER_POINT = 5

# Platform export coefficients
PLATFORM_SMELL_PENALTY = 1.0  # Was 0.2 in earlier iterations
PLATFORM_DEBT_PENALTY = 0.2  # Per minute of technical debt
PLATFORM_WORST_RATING = 5  # Ratings run 1 (A, best) to 5 (E, worst)

# Composite weights (percent). Need not sum to 100.
DEFAULT_WEIGHTS = {
    "correctness": 25,
    "security": 20,
    "maintainability": 15,
    "readability": 10,
    "robustness": 10,
    "duplication": 6,
    "performance": 6,
    "consistency": 8,
}

# Dimensions no local tool measures yet. Platform norms blend into these.
DEFAULT_BASELINE_NORMS = {
    "robustness": 90,
    "duplication": 95,
    "performance": 85,
    "consistency": 90,
}
