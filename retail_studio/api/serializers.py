"""Serializers between the editor's camelCase JSON and the element model."""

from typing import Any

from ..models.canvas import CanvasFormat
from ..models.element import Element, ElementKind, ElementSubtype, Frame, Style, TextAlign
from ..models.report import ComplianceReport

# snake_case style field -> wire name
_STYLE_KEYS = {
    "background_color": "backgroundColor",
    "color": "color",
    "font_size": "fontSize",
    "font_weight": "fontWeight",
    "font_family": "fontFamily",
    "border_radius": "borderRadius",
    "opacity": "opacity",
    "rotation": "rotation",
    "border": "border",
}


def _dimension(value: Any) -> int:
    """Absent or negative dimensions are degenerate (0)."""
    if value is None:
        return 0
    return max(0, int(value))


def parse_style(data: dict | None) -> Style:
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Element style must be an object, got {type(data).__name__}")
    values = {name: data.get(key) for name, key in _STYLE_KEYS.items()}
    align = data.get("textAlign")
    return Style(
        z_index=int(data.get("zIndex") or 0),
        text_align=TextAlign(align) if align else None,
        **values,
    )


def parse_element(data: dict) -> Element:
    """Parse one element record. Unknown type/subtype/textAlign raise ValueError."""
    if not isinstance(data, dict):
        raise ValueError(f"Element record must be an object, got {type(data).__name__}")
    if not data.get("id"):
        raise ValueError("Element is missing 'id'")
    return Element(
        id=str(data["id"]),
        kind=ElementKind(data.get("type")),
        subtype=ElementSubtype(data.get("subtype") or "none"),
        frame=Frame(
            x=int(data.get("x") or 0),
            y=int(data.get("y") or 0),
            width=_dimension(data.get("width")),
            height=_dimension(data.get("height")),
        ),
        content=data.get("content"),
        locked=bool(data.get("locked", False)),
        style=parse_style(data.get("style")),
    )


def parse_elements(records: list[dict]) -> list[Element]:
    """Parse a collection, rejecting duplicate ids."""
    if not isinstance(records, list):
        raise ValueError(f"Elements must be a list, got {type(records).__name__}")
    elements = [parse_element(record) for record in records]
    seen = set()
    for el in elements:
        if el.id in seen:
            raise ValueError(f"Duplicate element id: {el.id}")
        seen.add(el.id)
    return elements


def serialize_element(element: Element) -> dict:
    style = {"zIndex": element.style.z_index}
    for name, key in _STYLE_KEYS.items():
        value = getattr(element.style, name)
        if value is not None:
            style[key] = value
    if element.style.text_align is not None:
        style["textAlign"] = element.style.text_align.value

    result = {
        "id": element.id,
        "type": element.kind.value,
        "subtype": element.subtype.value,
        "x": element.frame.x,
        "y": element.frame.y,
        "width": element.frame.width,
        "height": element.frame.height,
        "locked": element.locked,
        "style": style,
    }
    if element.content is not None:
        result["content"] = element.content
    return result


def parse_format(data: dict) -> CanvasFormat:
    return CanvasFormat(
        id=str(data["id"]),
        name=str(data.get("name", data["id"])),
        width=int(data["width"]),
        height=int(data["height"]),
        aspect_ratio=str(data.get("ratio", "")),
    )


def serialize_format(fmt: CanvasFormat) -> dict:
    return {
        "id": fmt.id,
        "name": fmt.name,
        "width": fmt.width,
        "height": fmt.height,
        "ratio": fmt.aspect_ratio,
    }


def serialize_report(report: ComplianceReport) -> dict:
    return {
        "isCompliant": report.is_compliant,
        "score": report.score,
        "issues": list(report.issues),
        "suggestions": list(report.suggestions),
    }
