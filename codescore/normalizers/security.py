"""Security-scan normalizer with severity-tiered penalties."""

import logging
from typing import Any

from codescore.consts import (
    SECURITY_DEFAULT_SEVERITY,
    SECURITY_MEDIUM_LEVELS,
    SECURITY_PENALTY_MEDIUM,
    SECURITY_PENALTY_OTHER,
    SECURITY_PENALTY_SEVERE,
    SECURITY_SEVERE_LEVELS,
)

logger = logging.getLogger(__name__)


def extract_findings(artifact: Any | None) -> list[Any]:
    """Return the list of findings from a scan report.

    Accepts `{"results": [...]}` or a bare list.
    """
    if isinstance(artifact, list):
        return artifact
    if isinstance(artifact, dict):
        results = artifact.get("results")
        if isinstance(results, list):
            return results
    return []


def finding_severity(finding: Any) -> str:
    """Read a finding's severity, preferring `extra.severity`."""
    if not isinstance(finding, dict):
        return SECURITY_DEFAULT_SEVERITY

    extra = finding.get("extra")
    severity = extra.get("severity") if isinstance(extra, dict) else None
    if not severity:
        severity = finding.get("severity")
    if not severity:
        return SECURITY_DEFAULT_SEVERITY
    return str(severity).upper()


def severity_penalty(severity: str) -> int:
    """Points deducted for one finding of the given severity."""
    if severity in SECURITY_SEVERE_LEVELS:
        return SECURITY_PENALTY_SEVERE
    if severity in SECURITY_MEDIUM_LEVELS:
        return SECURITY_PENALTY_MEDIUM
    return SECURITY_PENALTY_OTHER


def normalize_security(artifact: Any | None) -> int:
    """Score a security scan report.

    Algorithm:
        score = 100 - (critical_or_high×30 + medium×10 + other×2)
        Minimum: 0
        Missing report: 100

    Args:
        artifact: Parsed scan report, or None

    Returns:
        Score between 0-100
    """
    if artifact is None:
        return 100

    findings = extract_findings(artifact)
    penalty = sum(severity_penalty(finding_severity(f)) for f in findings)
    logger.debug(f"Security: {len(findings)} findings, penalty {penalty}")

    return max(0, 100 - penalty)
