"""Low Everyday Price (LEP) starter layout."""

from . import register
from .base import BuildContext, TemplateBuilder
from .tags import LegalTagBuilder
from ..engine.editor import add_elements, delete_element, new_element
from ..engine.rules import SAFE_ZONE_TOP
from ..models.canvas import CanvasFormat
from ..models.element import Element, ElementKind, ElementSubtype, TextAlign
from ..models.styles import TESCO_BLUE, WHITE

DEFAULT_PACKSHOT = "https://picsum.photos/400/400"
HEADLINE_Y = 80


@register("lep")
class LepTemplateBuilder(TemplateBuilder):
    """White background, blue headline, packshot with the LEP logo to its right, legal tag."""

    def build(self, context: BuildContext) -> list[Element]:
        fmt = context.fmt
        cx = fmt.width // 2
        cy = fmt.height // 2
        existing = context.elements
        # Headline drops below the top safe band on 9:16
        headline_y = SAFE_ZONE_TOP if fmt.has_safe_zones else HEADLINE_Y

        bundle = [
            new_element(
                ElementKind.SHAPE, fmt, existing,
                x=0, y=0, width=fmt.width, height=fmt.height, locked=True,
                background_color=WHITE, z_index=0,
            ),
            new_element(
                ElementKind.TEXT, fmt, existing,
                x=50, y=headline_y, width=800, height=100, content="LOW EVERYDAY PRICE",
                color=TESCO_BLUE, font_size=80, font_weight="700",
                text_align=TextAlign.LEFT, z_index=10,
            ),
            new_element(
                ElementKind.IMAGE, fmt, existing, ElementSubtype.PACKSHOT,
                x=cx - 250, y=cy - 200, width=400, height=400,
                content=context.options.get("packshot_image", DEFAULT_PACKSHOT), z_index=5,
            ),
            # Logo sits right of the packshot
            new_element(
                ElementKind.SHAPE, fmt, existing, ElementSubtype.LEP_LOGO,
                x=cx + 160, y=cy - 100, width=100, height=100,
                background_color=TESCO_BLUE, border_radius=50, z_index=10,
            ),
        ]
        legal = LegalTagBuilder().build(BuildContext([*existing, *bundle], fmt))
        return [*bundle, *legal]


def apply_lep_template(
    elements: list[Element],
    fmt: CanvasFormat,
    packshot_image: str | None = None,
) -> list[Element]:
    """Replace any CTA with the LEP layout. Returns the new collection."""
    cta = next((el for el in elements if "cta" in el.subtype.value), None)
    if cta is not None:
        elements = delete_element(elements, cta.id)

    options = {"packshot_image": packshot_image} if packshot_image else {}
    bundle = LepTemplateBuilder().build(BuildContext(list(elements), fmt, options))
    return add_elements(elements, bundle)
