"""Geometric predicates over element frames.

All functions are pure and take `Frame` values. Negative widths or heights are
treated as zero (degenerate rectangles).
"""

import math

from ..models.element import Frame


def _extent(frame: Frame) -> tuple[int, int, int, int]:
    """Return (left, top, right, bottom) with negative dimensions clamped to 0."""
    width = max(0, frame.width or 0)
    height = max(0, frame.height or 0)
    return frame.x, frame.y, frame.x + width, frame.y + height


def overlaps(a: Frame, b: Frame) -> bool:
    """True unless one rectangle lies entirely left, right, above or below the other.

    Shared edges count as overlapping.
    """
    a_left, a_top, a_right, a_bottom = _extent(a)
    b_left, b_top, b_right, b_bottom = _extent(b)
    separated = (
        b_left > a_right
        or b_right < a_left
        or b_top > a_bottom
        or b_bottom < a_top
    )
    return not separated


def center_distance(a: Frame, b: Frame) -> float:
    """Euclidean distance between rectangle centers."""
    a_left, a_top, a_right, a_bottom = _extent(a)
    b_left, b_top, b_right, b_bottom = _extent(b)
    dx = (b_left + b_right) / 2 - (a_left + a_right) / 2
    dy = (b_top + b_bottom) / 2 - (a_top + a_bottom) / 2
    return math.hypot(dx, dy)


def edge_gap(a: Frame, b: Frame) -> float:
    """Clearance between two rectangles; 0 when they overlap or touch.

    Combines horizontal and vertical clearance as hypot(x_gap, y_gap).
    """
    a_left, a_top, a_right, a_bottom = _extent(a)
    b_left, b_top, b_right, b_bottom = _extent(b)
    x_gap = max(0, a_left - b_right, b_left - a_right)
    y_gap = max(0, a_top - b_bottom, b_top - a_bottom)
    return math.hypot(x_gap, y_gap)


def in_top_band(frame: Frame, band_height: int) -> bool:
    return frame.y < band_height


def in_bottom_band(frame: Frame, format_height: int, band_height: int) -> bool:
    return frame.bottom > format_height - band_height
