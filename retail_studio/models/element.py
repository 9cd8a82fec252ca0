"""Element model - a placed creative object on the canvas."""

from dataclasses import dataclass, field, replace
from enum import Enum


class ElementKind(Enum):
    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"
    GROUP = "group"


class ElementSubtype(Enum):
    """Compliance classification of a retail asset (Appendix A/B)."""

    NONE = "none"
    VALUE_TILE_CLUBCARD = "value-tile-clubcard"
    VALUE_TILE_NEW = "value-tile-new"
    VALUE_TILE_WHITE = "value-tile-white"
    CTA_PRIMARY = "cta-primary"
    LEGAL_TEXT = "legal-text"
    TAG_EXCLUSIVE = "tag-exclusive"
    TAG_STANDARD = "tag-standard"
    LOGO = "logo"
    LEP_LOGO = "lep-logo"
    PACKSHOT = "packshot"
    DRINKAWARE = "drinkaware"

    @property
    def label(self) -> str:
        """Human label used in audit messages, e.g. "value tile clubcard"."""
        return self.value.replace("-", " ")


# Subtype markers that make an element protected from being obscured
PROTECTED_MARKERS = ("value-tile", "cta", "tag", "drinkaware")


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Frame:
    """Axis-aligned rectangle in format-local units (origin top-left)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        """Bottom edge; negative heights count as 0."""
        return self.y + max(0, self.height or 0)


@dataclass(frozen=True)
class Style:
    """Presentation attributes. Only font_size, color and z_index matter to the audit."""

    z_index: int = 0
    background_color: str | None = None
    color: str | None = None
    font_size: int | None = None
    font_weight: str | None = None
    font_family: str | None = None
    border_radius: int | None = None
    opacity: float | None = None
    rotation: float | None = None
    border: str | None = None
    text_align: TextAlign | None = None


@dataclass(frozen=True)
class Element:
    """A placed creative object.

    `locked` pins the frame against drag/resize; content may still change
    (e.g. the price on a value tile).
    """

    id: str
    kind: ElementKind
    frame: Frame
    subtype: ElementSubtype = ElementSubtype.NONE
    content: str | None = None
    locked: bool = False
    style: Style = field(default_factory=Style)

    @property
    def z_index(self) -> int:
        return self.style.z_index

    @property
    def is_protected(self) -> bool:
        return any(marker in self.subtype.value for marker in PROTECTED_MARKERS)

    @property
    def is_background(self) -> bool:
        """Locked base layer: pinned at z 0 or carrying a `bg` id."""
        return self.locked and (self.style.z_index == 0 or "bg" in self.id)

    def with_z(self, z_index: int) -> "Element":
        return replace(self, style=replace(self.style, z_index=z_index))

    def with_frame(self, **changes) -> "Element":
        return replace(self, frame=replace(self.frame, **changes))
