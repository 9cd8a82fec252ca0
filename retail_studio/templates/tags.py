"""Single-element compliance assets: tags, legal line, Drinkaware, CTA, packshot."""

from . import register
from .base import EDGE_MARGIN, LEFT_INSET, BuildContext, TemplateBuilder
from .value_tiles import TILE_SIZE
from ..engine.editor import new_element
from ..models.element import Element, ElementKind, ElementSubtype, TextAlign
from ..models.styles import BLACK, LEGAL_GREY, SLATE, TESCO_BLUE, WHITE

LEGAL_TEXT = "Selected stores. While stocks last. Clubcard/app required. Ends 01/01"
LEGAL_HEIGHT = 40
DRINKAWARE_TEXT = "Drinkaware.co.uk"
PACKSHOT_BOX = 300


@register("tag.exclusive")
class ExclusiveTagBuilder(TemplateBuilder):
    def build(self, context: BuildContext) -> list[Element]:
        return [
            new_element(
                ElementKind.TEXT, context.fmt, context.elements, ElementSubtype.TAG_EXCLUSIVE,
                content="Only at Tesco", color=SLATE, font_size=24, font_weight="600",
            )
        ]


@register("tag.standard")
class StandardTagBuilder(TemplateBuilder):
    def build(self, context: BuildContext) -> list[Element]:
        return [
            new_element(
                ElementKind.TEXT, context.fmt, context.elements, ElementSubtype.TAG_STANDARD,
                content="Available at Tesco", color=SLATE, font_size=24, font_weight="600",
            )
        ]


@register("tag.legal")
class LegalTagBuilder(TemplateBuilder):
    """Legal line at bottom-left, stopping short of the value tile slot."""

    def build(self, context: BuildContext) -> list[Element]:
        width = context.fmt.width - LEFT_INSET - TILE_SIZE - 2 * EDGE_MARGIN
        return [
            new_element(
                ElementKind.TEXT, context.fmt, context.elements, ElementSubtype.LEGAL_TEXT,
                x=LEFT_INSET, y=context.bottom_edge - 60, width=width, height=LEGAL_HEIGHT,
                content=LEGAL_TEXT, color=LEGAL_GREY, font_size=20,
            )
        ]


@register("drinkaware")
class DrinkawareBuilder(TemplateBuilder):
    """Drinkaware lock-up: black only, at least 20 units tall."""

    def build(self, context: BuildContext) -> list[Element]:
        return [
            new_element(
                ElementKind.TEXT, context.fmt, context.elements, ElementSubtype.DRINKAWARE,
                x=LEFT_INSET, y=context.bottom_edge - 100, width=300, height=30,
                content=DRINKAWARE_TEXT, color=BLACK, font_size=20, font_weight="700",
                border="1px solid black", text_align=TextAlign.CENTER,
            )
        ]


@register("cta")
class CtaBuilder(TemplateBuilder):
    def build(self, context: BuildContext) -> list[Element]:
        return [
            new_element(
                ElementKind.SHAPE, context.fmt, context.elements, ElementSubtype.CTA_PRIMARY,
                width=250, height=60, content=context.options.get("label", "Shop Now"),
                background_color=TESCO_BLUE, border_radius=30, color=WHITE,
            )
        ]


@register("packshot")
class PackshotBuilder(TemplateBuilder):
    """Product image fitted into a 300x300 box, aspect preserved.

    Options: image (reference, required), image_width/image_height (natural size).
    """

    def build(self, context: BuildContext) -> list[Element]:
        image = context.options.get("image")
        if not image:
            raise ValueError("packshot requires an 'image' option")
        width, height = fit_box(
            context.options.get("image_width") or PACKSHOT_BOX,
            context.options.get("image_height") or PACKSHOT_BOX,
            PACKSHOT_BOX,
        )
        return [
            new_element(
                ElementKind.IMAGE, context.fmt, context.elements, ElementSubtype.PACKSHOT,
                width=width, height=height, content=image,
            )
        ]


def fit_box(width: int, height: int, box: int) -> tuple[int, int]:
    """Scale (width, height) to fit inside a box x box square."""
    scale = box / max(width, height)
    return max(1, round(width * scale)), max(1, round(height * scale))
