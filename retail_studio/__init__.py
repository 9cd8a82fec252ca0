"""Retail creative editor core: element model, layering, compliance audit, asset templates."""

from .engine.audit import ComplianceOracle, evaluate_compliance, run_audit
from .engine.layers import LayerDirection, move_layer
from .models import (
    CANVAS_FORMATS,
    CanvasFormat,
    ComplianceReport,
    Element,
    ElementKind,
    ElementSubtype,
    Frame,
    Style,
    TextAlign,
    get_format,
)
from .templates import build, list_builders

__all__ = [
    "ComplianceOracle",
    "evaluate_compliance",
    "run_audit",
    "LayerDirection",
    "move_layer",
    "CANVAS_FORMATS",
    "CanvasFormat",
    "ComplianceReport",
    "Element",
    "ElementKind",
    "ElementSubtype",
    "Frame",
    "Style",
    "TextAlign",
    "get_format",
    "build",
    "list_builders",
]
