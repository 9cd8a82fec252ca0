"""Semantic compliance service - LLM audit of creative copy."""

import json
import logging

from ..clients.llm import LLMClient
from ..engine.audit import ComplianceOracle
from ..models.report import ComplianceReport, fallback_report
from .prompt_loader import load_prompt

logger = logging.getLogger(__name__)


class SemanticComplianceService(ComplianceOracle):
    """Audit copy bans and mandatory tags with an LLM. Never raises."""

    def __init__(self, llm: LLMClient | None):
        self.llm = llm

    def check_compliance(self, texts: list[str], has_alcohol: bool) -> ComplianceReport:
        if self.llm is None:
            logger.warning("Compliance check skipped: no LLM client configured")
            return fallback_report()
        try:
            data = self.llm.call_json(
                load_prompt("compliance"),
                self._build_user_message(texts, has_alcohol),
                label="COMPLIANCE",
            )
            return parse_report(data)
        except Exception as e:
            logger.warning(f"Compliance check failed: {e}")
            return fallback_report()

    def _build_user_message(self, texts: list[str], has_alcohol: bool) -> str:
        lines = [
            f"Content Found: {json.dumps(texts, ensure_ascii=False)}",
            f"Alcohol Product Present: {str(has_alcohol).lower()}",
        ]
        return "\n".join(lines)


def parse_report(data: dict) -> ComplianceReport:
    """Validate an oracle reply into a report. Score is clamped to 0..100.

    Raises ValueError on missing or mistyped fields.
    """
    score = data.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValueError(f"Invalid score: {score!r}")

    issues = data.get("issues", [])
    suggestions = data.get("suggestions", [])
    for name, values in (("issues", issues), ("suggestions", suggestions)):
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"Invalid {name}: {values!r}")

    return ComplianceReport(
        is_compliant=bool(data.get("isCompliant", not issues)),
        score=min(100, max(0, int(score))),
        issues=list(issues),
        suggestions=list(suggestions),
    )
