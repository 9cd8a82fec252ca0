"""Deterministic compliance rules (Appendix A/B geometry and structure).

Each rule appends issues and penalties to a shared `RuleFindings`; rules are
independent and every one runs on every audit.
"""

import re

from ..models.canvas import CanvasFormat
from ..models.element import Element, ElementKind, ElementSubtype
from ..models.report import RuleFindings
from ..models.styles import BLACK, WHITE, normalize_color
from .geometry import center_distance, edge_gap, in_bottom_band, in_top_band, overlaps

# Safe zones (9:16 only)
SAFE_ZONE_TOP = 200
SAFE_ZONE_BOTTOM = 250

MIN_FONT_SIZE = 20
MIN_CTA_GAP = 24
DRINKAWARE_MIN_HEIGHT = 20
DRINKAWARE_COLORS = (BLACK, WHITE)

PENALTY_OBSCURED = 20
PENALTY_SAFE_ZONE = 10
PENALTY_FONT_SIZE = 5
PENALTY_NO_PACKSHOT = 10
PENALTY_PACKSHOT_NOT_NEAREST = 15
PENALTY_CTA_GAP = 15
PENALTY_NO_DRINKAWARE = 30
PENALTY_DRINKAWARE_COLOR = 10
PENALTY_DRINKAWARE_HEIGHT = 10
PENALTY_CLUBCARD_DATE = 15
PENALTY_CLUBCARD_APP = 15

CLUBCARD_DATE_RE = re.compile(r"Ends \d{2}/\d{2}", re.IGNORECASE)
CLUBCARD_APP_RE = re.compile(r"Clubcard/app required", re.IGNORECASE)


def is_full_bleed(element: Element, fmt: CanvasFormat) -> bool:
    """Shape or image spanning the full format width (backdrop)."""
    return (
        element.kind in (ElementKind.SHAPE, ElementKind.IMAGE)
        and element.frame.width == fmt.width
    )


def evaluate(
    elements: list[Element],
    fmt: CanvasFormat,
    text_contents: list[str],
    has_alcohol: bool,
) -> RuleFindings:
    """Run every deterministic rule and return the accumulated findings."""
    findings = RuleFindings()
    check_protected_zones(elements, fmt, findings)
    check_safe_zones(elements, fmt, findings)
    check_font_sizes(elements, findings)
    check_packshot_cta(elements, findings)
    check_drinkaware(elements, has_alcohol, findings)
    check_clubcard_legal(elements, text_contents, findings)
    return findings


def check_protected_zones(
    elements: list[Element], fmt: CanvasFormat, findings: RuleFindings
):
    """Content painted above a protected asset and overlapping it obscures it."""
    protected = [el for el in elements if el.is_protected]
    for el in elements:
        if el.is_protected:
            continue
        # Full-width packshots still count as content
        if is_full_bleed(el, fmt) and el.subtype is not ElementSubtype.PACKSHOT:
            continue
        for prot in protected:
            if overlaps(el.frame, prot.frame) and el.z_index > prot.z_index:
                findings.add(
                    f"CRITICAL (Appx B): Element overlaps {prot.subtype.label}. "
                    "Content cannot overlay restricted zones.",
                    PENALTY_OBSCURED,
                )


def check_safe_zones(elements: list[Element], fmt: CanvasFormat, findings: RuleFindings):
    if not fmt.has_safe_zones:
        return
    for el in elements:
        if is_full_bleed(el, fmt):
            continue
        if in_top_band(el.frame, SAFE_ZONE_TOP):
            findings.add(
                f"Safe Zone (Appx A): Element enters top {SAFE_ZONE_TOP}px restricted area.",
                PENALTY_SAFE_ZONE,
            )
        if in_bottom_band(el.frame, fmt.height, SAFE_ZONE_BOTTOM):
            findings.add(
                f"Safe Zone (Appx A): Element enters bottom {SAFE_ZONE_BOTTOM}px restricted area.",
                PENALTY_SAFE_ZONE,
            )


def check_font_sizes(elements: list[Element], findings: RuleFindings):
    for el in elements:
        if el.kind is not ElementKind.TEXT:
            continue
        font_size = el.style.font_size or 0
        if font_size < MIN_FONT_SIZE:
            findings.add(
                f"Accessibility (Appx B): Font size {font_size}px is below "
                f"{MIN_FONT_SIZE}px minimum.",
                PENALTY_FONT_SIZE,
            )


def check_packshot_cta(elements: list[Element], findings: RuleFindings):
    """Packshot must be the element nearest the CTA, with at least 24px clearance."""
    cta = next((el for el in elements if "cta" in el.subtype.value), None)
    if cta is None:
        return

    packshot = next((el for el in elements if el.subtype is ElementSubtype.PACKSHOT), None)
    if packshot is None:
        findings.add("Design Fail: CTA present but no Packshot found.", PENALTY_NO_PACKSHOT)
        return

    packshot_distance = center_distance(cta.frame, packshot.frame)
    others = [
        el for el in elements
        if el.id not in (cta.id, packshot.id)
        and el.kind is not ElementKind.SHAPE
        and not el.locked
    ]
    closer = next(
        (el for el in others if center_distance(cta.frame, el.frame) < packshot_distance),
        None,
    )
    if closer is not None:
        findings.add(
            "Design Fail (Appx B): Packshot must be the nearest element to CTA. "
            f"Found '{closer.kind.value}' closer.",
            PENALTY_PACKSHOT_NOT_NEAREST,
        )

    gap = edge_gap(cta.frame, packshot.frame)
    if gap < MIN_CTA_GAP:
        findings.add(
            f"Design Fail (Appx B): Gap between Packshot and CTA is {round(gap)}px. "
            f"Minimum required is {MIN_CTA_GAP}px.",
            PENALTY_CTA_GAP,
        )


def check_drinkaware(elements: list[Element], has_alcohol: bool, findings: RuleFindings):
    if not has_alcohol:
        return

    drinkaware = next(
        (el for el in elements if el.subtype is ElementSubtype.DRINKAWARE), None
    )
    if drinkaware is None:
        findings.add(
            "CRITICAL FAIL: Alcohol content detected but 'Drinkaware' lock-up is missing.",
            PENALTY_NO_DRINKAWARE,
        )
        return

    if normalize_color(drinkaware.style.color) not in DRINKAWARE_COLORS:
        findings.add("Drinkaware Fail: Must be all-black or all-white.", PENALTY_DRINKAWARE_COLOR)
    if drinkaware.frame.height < DRINKAWARE_MIN_HEIGHT:
        findings.add(
            f"Drinkaware Fail: Minimum height is {DRINKAWARE_MIN_HEIGHT}px.",
            PENALTY_DRINKAWARE_HEIGHT,
        )


def check_clubcard_legal(
    elements: list[Element], text_contents: list[str], findings: RuleFindings
):
    if not any(el.subtype is ElementSubtype.VALUE_TILE_CLUBCARD for el in elements):
        return

    if not any(CLUBCARD_DATE_RE.search(text) for text in text_contents):
        findings.add(
            "Legal Fail: Clubcard tile present but no 'Ends DD/MM' date found in text.",
            PENALTY_CLUBCARD_DATE,
        )
    if not any(CLUBCARD_APP_RE.search(text) for text in text_contents):
        findings.add(
            "Legal Fail: Clubcard tile present but 'Clubcard/app required' text missing.",
            PENALTY_CLUBCARD_APP,
        )
