"""Data models."""

from .canvas import CANVAS_FORMATS, CanvasFormat, get_format, list_formats
from .element import Element, ElementKind, ElementSubtype, Frame, Style, TextAlign
from .report import ComplianceReport, RuleFindings, fallback_report

__all__ = [
    "CANVAS_FORMATS",
    "CanvasFormat",
    "get_format",
    "list_formats",
    "Element",
    "ElementKind",
    "ElementSubtype",
    "Frame",
    "Style",
    "TextAlign",
    "ComplianceReport",
    "RuleFindings",
    "fallback_report",
]
