"""Canvas formats - target dimensions for a creative."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CanvasFormat:
    """Target canvas: {id, name, width, height, aspect_ratio}."""

    id: str
    name: str
    width: int
    height: int
    aspect_ratio: str

    @property
    def has_safe_zones(self) -> bool:
        """Only 9:16 (story) placements reserve platform UI bands."""
        return self.aspect_ratio == "9:16"


CANVAS_FORMATS: list[CanvasFormat] = [
    CanvasFormat("sq", "Social Square", 1080, 1080, "1:1"),
    CanvasFormat("story", "Social Story", 1080, 1920, "9:16"),
    CanvasFormat("landscape", "Display Banner", 1200, 628, "1.91:1"),
]

_FORMATS_BY_ID = {f.id: f for f in CANVAS_FORMATS}


def get_format(format_id: str) -> CanvasFormat:
    """Get canvas format by id."""
    if format_id not in _FORMATS_BY_ID:
        raise ValueError(f"Unknown canvas format: {format_id}. Available: {list_formats()}")
    return _FORMATS_BY_ID[format_id]


def list_formats() -> list[str]:
    """List all canvas format ids."""
    return list(_FORMATS_BY_ID.keys())
