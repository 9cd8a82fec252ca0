"""
Tests for the audit pipeline.
"""

import pytest

from retail_studio.engine.audit import (
    ComplianceOracle,
    collect_text_contents,
    detect_alcohol,
    evaluate_compliance,
    run_audit,
)
from retail_studio.models import ComplianceReport
from retail_studio.models.report import FALLBACK_REPORT_ISSUE, FALLBACK_REPORT_SUGGESTION


class TestDetectAlcohol:
    """Tests for the alcohol keyword match."""

    @pytest.mark.parametrize("text", ["Fine WINE", "craft beer", "Vodka", "ginger shot"])
    def test_keywords(self, text):
        assert detect_alcohol(["Summer deals", text])

    def test_no_keywords(self):
        assert not detect_alcohol(["Fresh bread", "Only at Tesco"])
        assert not detect_alcohol([])


class TestRunAudit:
    """Tests for merging semantic and deterministic results."""

    def test_clean_creative(self, make_element, square, clean_oracle):
        report = run_audit([make_element("t", font_size=48)], square, ["Hello"], clean_oracle)
        assert report.is_compliant
        assert report.score == 100
        assert report.issues == []

    def test_oracle_issues_come_first(self, make_element, square, make_oracle):
        oracle = make_oracle(score=90, issues=["Copy makes a health claim."],
                             suggestions=["Remove the claim."])
        report = run_audit([make_element("t", font_size=12)], square, ["Healthy!"], oracle)

        assert report.issues[0] == "Copy makes a health claim."
        assert "Font size 12px" in report.issues[1]
        assert report.score == 85
        assert report.suggestions == ["Remove the claim."]
        assert not report.is_compliant

    def test_oracle_receives_alcohol_flag(self, square, make_oracle):
        oracle = make_oracle()
        run_audit([], square, ["Cold beer"], oracle)
        assert oracle.calls == [(["Cold beer"], True)]

    def test_oracle_failure_uses_fallback(self, make_element, square, failing_oracle):
        """Test an unreachable oracle degrades to the fallback report."""
        report = run_audit([make_element("t", font_size=12)], square, [], failing_oracle)
        assert report.issues[0] == FALLBACK_REPORT_ISSUE
        assert len(report.issues) == 2
        assert report.suggestions == [FALLBACK_REPORT_SUGGESTION]
        assert report.score == 0
        assert not report.is_compliant

    def test_score_floor(self, make_element, square, make_oracle):
        elements = [make_element(f"t{i}", font_size=10) for i in range(5)]
        report = run_audit(elements, square, [], make_oracle(score=10))
        assert report.score == 0

    def test_score_and_compliance_decoupled(self, make_element, square, make_oracle):
        """Test a full score does not imply compliance."""
        oracle = make_oracle(score=100, issues=["Tone is off-brand."])
        report = run_audit([], square, [], oracle)
        assert report.score == 100
        assert not report.is_compliant

    def test_deterministic(self, make_element, square, make_oracle):
        elements = [
            make_element("t", font_size=12),
            make_element("tile", "shape", subtype="value-tile-clubcard", locked=True, z=60),
        ]
        first = run_audit(elements, square, ["Clubcard Price"], make_oracle(score=95))
        second = run_audit(elements, square, ["Clubcard Price"], make_oracle(score=95))
        assert first == second


class ReplyOracle(ComplianceOracle):
    """Returns whatever it was given, well-formed or not."""

    def __init__(self, reply):
        self.reply = reply

    def check_compliance(self, texts, has_alcohol):
        return self.reply


class TestMalformedOracleReply:
    """Tests that unusable oracle replies degrade like failures."""

    @pytest.mark.parametrize("reply", [
        None,
        {"score": 90},
        ComplianceReport(is_compliant=True, score=None),
        ComplianceReport(is_compliant=True, score=True),
        ComplianceReport(is_compliant=False, score=80, issues="bad copy"),
        ComplianceReport(is_compliant=True, score=80, suggestions=[None]),
    ])
    def test_fallback(self, make_element, square, reply):
        report = run_audit([make_element("t", font_size=12)], square, [], ReplyOracle(reply))
        assert report.issues[0] == FALLBACK_REPORT_ISSUE
        assert report.suggestions == [FALLBACK_REPORT_SUGGESTION]
        assert report.score == 0

    def test_float_score(self, square):
        report = run_audit([], square, [], ReplyOracle(ComplianceReport(True, 87.5)))
        assert report.score == 87


class TestEvaluateCompliance:
    """Tests for auditing with the elements' own copy."""

    def test_collect_text_contents(self, make_element):
        elements = [
            make_element("a", content="Ends 01/02"),
            make_element("b", "shape", content="ignored"),
            make_element("c"),
        ]
        assert collect_text_contents(elements) == ["Ends 01/02", ""]

    def test_uses_element_text(self, make_element, square, make_oracle):
        elements = [
            make_element("tile", "shape", x=790, y=790, width=250, height=250,
                         subtype="value-tile-clubcard", locked=True, z=60),
            make_element("legal", x=50, y=900, width=600, height=40, font_size=20,
                         content="Clubcard/app required. Ends 01/01"),
        ]
        oracle = make_oracle()
        report = evaluate_compliance(elements, square, oracle)
        assert report.is_compliant
        assert oracle.calls == [(["Clubcard/app required. Ends 01/01"], False)]
