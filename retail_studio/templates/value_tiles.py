"""Value tiles (Appendix A): clubcard tile, "new" roundel, white roundel.

Tiles sit at a predefined bottom-right slot and every part is locked. Price
labels stay content-editable while locked.
"""

from abc import abstractmethod

from . import register
from .base import EDGE_MARGIN, BuildContext, TemplateBuilder
from ..engine.editor import new_element
from ..models.element import Element, ElementKind, ElementSubtype, TextAlign
from ..models.styles import BLACK, CLUBCARD_YELLOW, TESCO_BLUE, TESCO_RED, WHITE

TILE_SIZE = 250
ROUNDEL_RADIUS = 999


def tile_anchor(context: BuildContext) -> tuple[int, int]:
    """Top-left of the tile slot, inset from the bottom-right corner."""
    x = context.fmt.width - TILE_SIZE - EDGE_MARGIN
    y = context.bottom_edge - TILE_SIZE - EDGE_MARGIN
    return x, y


class ValueTileBuilder(TemplateBuilder):
    """Shared tile placement: backing shape at elevated z, labels one above."""

    SUBTYPE: ElementSubtype

    def build(self, context: BuildContext) -> list[Element]:
        x, y = tile_anchor(context)
        tile_z = context.elevated_z
        tile = new_element(
            ElementKind.SHAPE, context.fmt, context.elements, self.SUBTYPE,
            x=x, y=y, width=TILE_SIZE, height=TILE_SIZE, locked=True,
            z_index=tile_z, **self._tile_style(),
        )
        return [tile, *self._labels(context, x, y, tile_z + 1)]

    @abstractmethod
    def _tile_style(self) -> dict:
        pass

    @abstractmethod
    def _labels(self, context: BuildContext, x: int, y: int, z: int) -> list[Element]:
        pass

    def _label(
        self,
        context: BuildContext,
        content: str,
        x: int,
        y: int,
        height: int,
        z: int,
        **style,
    ) -> Element:
        # Labels carry the tile subtype: they are part of the protected asset
        return new_element(
            ElementKind.TEXT, context.fmt, context.elements, self.SUBTYPE,
            x=x, y=y, width=TILE_SIZE, height=height, content=content, locked=True,
            z_index=z, text_align=TextAlign.CENTER, **style,
        )


@register("value_tile.clubcard")
class ClubcardTileBuilder(ValueTileBuilder):
    """Yellow flat tile with "Clubcard Price", offer price and regular price."""

    SUBTYPE = ElementSubtype.VALUE_TILE_CLUBCARD

    def _tile_style(self) -> dict:
        return {"background_color": CLUBCARD_YELLOW}

    def _labels(self, context: BuildContext, x: int, y: int, z: int) -> list[Element]:
        offer = context.options.get("offer_price", "£3.50")
        regular = context.options.get("regular_price", "£4.50")
        return [
            self._label(context, "Clubcard Price", x, y + 20, 40, z,
                        color=TESCO_BLUE, font_size=24, font_weight="700"),
            self._label(context, offer, x, y + 60, 60, z,
                        color=TESCO_BLUE, font_size=56, font_weight="800"),
            self._label(context, f"Was {regular}", x, y + 130, 30, z,
                        color=TESCO_BLUE, font_size=20, font_weight="500"),
        ]


@register("value_tile.new")
class NewRoundelBuilder(ValueTileBuilder):
    SUBTYPE = ElementSubtype.VALUE_TILE_NEW

    def _tile_style(self) -> dict:
        return {"background_color": TESCO_RED, "border_radius": ROUNDEL_RADIUS}

    def _labels(self, context: BuildContext, x: int, y: int, z: int) -> list[Element]:
        return [
            self._label(context, "NEW", x, y, TILE_SIZE, z,
                        color=WHITE, font_size=48, font_weight="700"),
        ]


@register("value_tile.white")
class WhiteRoundelBuilder(ValueTileBuilder):
    SUBTYPE = ElementSubtype.VALUE_TILE_WHITE

    def _tile_style(self) -> dict:
        return {
            "background_color": WHITE,
            "border_radius": ROUNDEL_RADIUS,
            "border": "2px solid #ccc",
        }

    def _labels(self, context: BuildContext, x: int, y: int, z: int) -> list[Element]:
        price = context.options.get("price", "£2.00")
        return [
            self._label(context, price, x, y, TILE_SIZE, z,
                        color=BLACK, font_size=56, font_weight="700"),
        ]
