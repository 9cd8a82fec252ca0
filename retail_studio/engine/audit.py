"""Audit pipeline - merges the semantic oracle with the deterministic rules."""

import logging
import re
from abc import ABC, abstractmethod

from ..models.canvas import CanvasFormat
from ..models.element import Element, ElementKind
from ..models.report import ComplianceReport, fallback_report
from .rules import evaluate

logger = logging.getLogger(__name__)

ALCOHOL_RE = re.compile(r"wine|beer|spirit|alcohol|vodka|gin|whisky", re.IGNORECASE)


class ComplianceOracle(ABC):
    """Semantic copy check: text policy issues, suggestions and a baseline score."""

    @abstractmethod
    def check_compliance(self, texts: list[str], has_alcohol: bool) -> ComplianceReport:
        pass


def detect_alcohol(texts: list[str]) -> bool:
    """Substring keyword match, so "ginger" also counts."""
    return any(ALCOHOL_RE.search(text) for text in texts)


def collect_text_contents(elements: list[Element]) -> list[str]:
    """Content of every text element, in collection order."""
    return [el.content or "" for el in elements if el.kind is ElementKind.TEXT]


def _validate_report(report) -> ComplianceReport:
    """Reject oracle replies that cannot be merged."""
    if not isinstance(report, ComplianceReport):
        raise ValueError(f"Oracle returned {type(report).__name__}, not a ComplianceReport")
    if isinstance(report.score, bool) or not isinstance(report.score, (int, float)):
        raise ValueError(f"Invalid oracle score: {report.score!r}")
    for name in ("issues", "suggestions"):
        values = getattr(report, name)
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"Invalid oracle {name}: {values!r}")
    return report


def run_audit(
    elements: list[Element],
    fmt: CanvasFormat,
    texts: list[str],
    oracle: ComplianceOracle,
) -> ComplianceReport:
    """Audit a creative snapshot. Never raises for oracle failures."""
    has_alcohol = detect_alcohol(texts)

    try:
        semantic = _validate_report(oracle.check_compliance(list(texts), has_alcohol))
    except Exception as e:
        logger.warning(f"Compliance oracle failed: {e}")
        semantic = fallback_report()

    findings = evaluate(elements, fmt, texts, has_alcohol)

    issues = [*semantic.issues, *findings.issues]
    return ComplianceReport(
        is_compliant=not issues,
        score=max(0, int(semantic.score) + findings.score_delta),
        issues=issues,
        suggestions=list(semantic.suggestions),
    )


def evaluate_compliance(
    elements: list[Element],
    fmt: CanvasFormat,
    oracle: ComplianceOracle,
) -> ComplianceReport:
    """Audit using the text content of the elements themselves."""
    return run_audit(elements, fmt, collect_text_contents(elements), oracle)
