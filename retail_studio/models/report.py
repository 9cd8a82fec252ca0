"""Compliance report models."""

from dataclasses import dataclass, field


@dataclass
class ComplianceReport:
    """Final audit output. is_compliant is issue-count based, not score based."""

    is_compliant: bool
    score: int
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass
class RuleFindings:
    """Deterministic engine output: issues plus a non-positive score delta."""

    issues: list[str] = field(default_factory=list)
    score_delta: int = 0

    def add(self, issue: str, penalty: int):
        self.issues.append(issue)
        self.score_delta -= penalty


FALLBACK_REPORT_ISSUE = "AI Service Error: Could not validate."
FALLBACK_REPORT_SUGGESTION = "Please check connection and service availability."


def fallback_report() -> ComplianceReport:
    """Report substituted when the semantic oracle cannot be reached or parsed."""
    return ComplianceReport(
        is_compliant=False,
        score=0,
        issues=[FALLBACK_REPORT_ISSUE],
        suggestions=[FALLBACK_REPORT_SUGGESTION],
    )
