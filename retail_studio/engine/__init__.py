"""Deterministic editor engine: geometry, layering, rules and the audit pipeline."""

from .audit import (
    ComplianceOracle,
    collect_text_contents,
    detect_alcohol,
    evaluate_compliance,
    run_audit,
)
from .geometry import center_distance, edge_gap, in_bottom_band, in_top_band, overlaps
from .layers import LayerDirection, move_layer, paint_order
from .rules import evaluate, is_full_bleed

__all__ = [
    "ComplianceOracle",
    "collect_text_contents",
    "detect_alcohol",
    "evaluate_compliance",
    "run_audit",
    "center_distance",
    "edge_gap",
    "in_bottom_band",
    "in_top_band",
    "overlaps",
    "LayerDirection",
    "move_layer",
    "paint_order",
    "evaluate",
    "is_full_bleed",
]
