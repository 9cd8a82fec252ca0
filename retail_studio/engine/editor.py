"""Element collection editing.

Every function takes the current snapshot and returns a new list; the caller
owns the single writable collection and swaps it in.
"""

from dataclasses import fields, replace

from ..models.canvas import CanvasFormat
from ..models.element import Element, ElementKind, ElementSubtype, Frame, Style
from ..utils import new_element_id
from .layers import Z_STRIDE, max_z

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 100
DEFAULT_TEXT = "New Element"
DEFAULT_COLOR = "#000000"
DEFAULT_FONT_SIZE = 48
DEFAULT_FONT_WEIGHT = "400"

_STYLE_FIELDS = {f.name for f in fields(Style)}


def new_element(
    kind: ElementKind,
    fmt: CanvasFormat,
    elements: list[Element],
    subtype: ElementSubtype = ElementSubtype.NONE,
    *,
    x: int | None = None,
    y: int | None = None,
    width: int | None = None,
    height: int | None = None,
    content: str | None = None,
    locked: bool = False,
    **style,
) -> Element:
    """Build an element with editor defaults, stacked above existing content.

    Style keyword arguments override the defaults, z_index included.
    """
    unknown = set(style) - _STYLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown style fields: {sorted(unknown)}")

    width = width if width is not None else DEFAULT_WIDTH
    height = height if height is not None else DEFAULT_HEIGHT
    # Centered on the canvas unless placed
    frame = Frame(
        x=x if x is not None else fmt.width // 2 - width // 2,
        y=y if y is not None else fmt.height // 2 - height // 2,
        width=width,
        height=height,
    )
    if content is None and kind is ElementKind.TEXT:
        content = DEFAULT_TEXT

    style_values = {
        "color": DEFAULT_COLOR,
        "font_size": DEFAULT_FONT_SIZE,
        "font_weight": DEFAULT_FONT_WEIGHT,
        "z_index": max_z(elements) + Z_STRIDE,
        **style,
    }
    return Element(
        id=new_element_id(),
        kind=kind,
        subtype=subtype,
        frame=frame,
        content=content,
        locked=locked,
        style=Style(**style_values),
    )


def find_element(elements: list[Element], element_id: str) -> Element | None:
    return next((el for el in elements if el.id == element_id), None)


def add_element(elements: list[Element], element: Element) -> list[Element]:
    return add_elements(elements, [element])


def add_elements(elements: list[Element], bundle: list[Element]) -> list[Element]:
    """Append a bundle, rejecting ids already present."""
    existing = {el.id for el in elements}
    for el in bundle:
        if el.id in existing:
            raise ValueError(f"Duplicate element id: {el.id}")
        existing.add(el.id)
    return [*elements, *bundle]


def delete_element(elements: list[Element], element_id: str) -> list[Element]:
    return [el for el in elements if el.id != element_id]


def update_element(elements: list[Element], element_id: str, **changes) -> list[Element]:
    """Partial update. `style` may be a dict of style fields to merge.

    Unknown ids leave the collection unchanged.
    """
    style_changes = changes.pop("style", None)
    frame_changes = {k: changes.pop(k) for k in ("x", "y", "width", "height") if k in changes}

    updated = []
    for el in elements:
        if el.id == element_id:
            if frame_changes:
                el = el.with_frame(**frame_changes)
            if style_changes:
                el = replace(el, style=replace(el.style, **style_changes))
            if changes:
                el = replace(el, **changes)
        updated.append(el)
    return updated


def move_element(elements: list[Element], element_id: str, x: float, y: float) -> list[Element]:
    """Apply a drag result. Locked elements keep their position."""
    target = find_element(elements, element_id)
    if target is None or target.locked:
        return list(elements)
    return update_element(elements, element_id, x=round(x), y=round(y))


def apply_layer_changes(elements: list[Element], changed: list[Element]) -> list[Element]:
    """Merge `move_layer` output back into the collection."""
    new_z = {el.id: el.z_index for el in changed}
    return [el.with_z(new_z[el.id]) if el.id in new_z else el for el in elements]


def change_format(elements: list[Element], fmt: CanvasFormat) -> list[Element]:
    """Resize the locked background to a new canvas format."""
    background = next((el for el in elements if el.is_background), None)
    if background is None:
        return list(elements)
    return update_element(elements, background.id, width=fmt.width, height=fmt.height)
