"""Template builder base class and build context."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..engine.layers import max_z
from ..engine.rules import SAFE_ZONE_BOTTOM
from ..models.canvas import CanvasFormat
from ..models.element import Element

# Compliance assets stack this far above the current top layer
ELEVATED_Z_OFFSET = 50
EDGE_MARGIN = 40
LEFT_INSET = 50


@dataclass
class BuildContext:
    """Snapshot a builder places new elements against."""
    elements: list[Element]
    fmt: CanvasFormat
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def elevated_z(self) -> int:
        return max_z(self.elements) + ELEVATED_Z_OFFSET

    @property
    def bottom_edge(self) -> int:
        """Lowest usable y: canvas bottom, or the top of the bottom safe band."""
        if self.fmt.has_safe_zones:
            return self.fmt.height - SAFE_ZONE_BOTTOM
        return self.fmt.height


class TemplateBuilder(ABC):
    """Builds a coordinated bundle of elements for one compliance asset."""

    @abstractmethod
    def build(self, context: BuildContext) -> list[Element]:
        """Return the new elements; the caller appends them."""
        pass
