"""Creative generation service - headlines, strategies and background images."""

import logging
from dataclasses import dataclass

from ..clients.gemini import GeminiClient
from ..clients.llm import LLMClient
from ..engine.editor import add_element, find_element, new_element, update_element
from ..models.canvas import CanvasFormat
from ..models.element import Element, ElementKind, ElementSubtype
from ..models.styles import TESCO_BLUE
from .assets import to_image_asset
from .prompt_loader import load_prompt

logger = logging.getLogger(__name__)

FALLBACK_HEADLINE = "Special Offer Available Now"
EMPTY_HEADLINE = "Special Offer"
HEADLINE_MIN_FONT_SIZE = 40


@dataclass
class CreativeStrategy:
    """Headline plus a scene description for the background image."""
    headline: str
    image_prompt: str


class CreativeService:
    """Generate copy and imagery for a creative. Failures degrade, never raise."""

    def __init__(self, llm: LLMClient, gemini: GeminiClient | None = None):
        self.llm = llm
        self.gemini = gemini

    def generate_headline(self, brief: str, tone: str, format_name: str) -> str:
        """Single banner headline for a product brief."""
        user_message = "\n".join([
            f"Product: {brief}",
            f"Tone: {tone}",
            f"Ad Format: {format_name}",
        ])
        try:
            text = self.llm.call(load_prompt("headline"), user_message, label="HEADLINE")
        except Exception as e:
            logger.warning(f"Headline generation failed: {e}")
            return FALLBACK_HEADLINE

        text = text.replace('"', "").strip()
        return text or EMPTY_HEADLINE

    def generate_strategy(self, brief: str) -> CreativeStrategy | None:
        """Headline and background scene, or None when the model fails."""
        try:
            data = self.llm.call_json(
                load_prompt("strategy"),
                f'User wants an ad for: "{brief}"',
                label="STRATEGY",
            )
            headline = data["headline"]
            image_prompt = data["backgroundPrompt"]
            if not isinstance(headline, str) or not isinstance(image_prompt, str):
                raise ValueError(f"Unexpected strategy reply: {data}")
        except Exception as e:
            logger.warning(f"Strategy generation failed: {e}")
            return None
        return CreativeStrategy(headline=headline.strip(), image_prompt=image_prompt.strip())

    def generate_image(self, prompt: str, aspect_ratio: str = "1:1") -> str | None:
        """Background image as a PNG data URI, or None."""
        if self.gemini is None:
            logger.warning("Image generation skipped: no Gemini client configured")
            return None
        try:
            full_prompt = load_prompt("background").format(scene=prompt)
            image_bytes = self.gemini.generate_image(full_prompt, aspect_ratio=aspect_ratio)
            return to_image_asset(image_bytes).data_uri
        except Exception as e:
            logger.warning(f"Image generation failed: {e}")
            return None

    # ===== Editor operations =====

    def magic_build(self, elements: list[Element], fmt: CanvasFormat, brief: str) -> list[Element]:
        """
        Auto-design: strategy -> background image -> headline.

        Reuses an existing full-width background image and the first unlocked
        large headline when present; otherwise adds them.

        Returns:
            New element collection (unchanged if no strategy could be produced)
        """
        strategy = self.generate_strategy(brief)
        if strategy is None:
            return list(elements)

        image = self.generate_image(strategy.image_prompt, fmt.aspect_ratio)
        if image:
            backdrop = next(
                (
                    el for el in elements
                    if el.kind is ElementKind.IMAGE
                    and el.frame.width == fmt.width
                    and el.subtype is not ElementSubtype.PACKSHOT
                ),
                None,
            )
            if backdrop is not None:
                elements = update_element(elements, backdrop.id, content=image)
            else:
                elements = add_element(elements, self._backdrop(elements, fmt, image, z_index=1))

        headline = next(
            (
                el for el in elements
                if el.kind is ElementKind.TEXT
                and (el.style.font_size or 0) > HEADLINE_MIN_FONT_SIZE
                and not el.locked
            ),
            None,
        )
        if headline is not None:
            return update_element(elements, headline.id, content=strategy.headline)

        return add_element(elements, new_element(
            ElementKind.TEXT, fmt, elements,
            x=50, y=100, width=fmt.width - 100, content=strategy.headline,
            color=TESCO_BLUE, font_size=80, font_weight="700",
        ))

    def write_copy(
        self,
        elements: list[Element],
        element_id: str,
        product: str,
        tone: str,
        fmt: CanvasFormat,
    ) -> list[Element]:
        """Replace a text element's content with a generated headline."""
        target = find_element(elements, element_id)
        if target is None or target.kind is not ElementKind.TEXT or not product:
            return list(elements)
        copy = self.generate_headline(product, tone, fmt.name)
        return update_element(elements, element_id, content=copy)

    def add_generated_background(
        self, elements: list[Element], fmt: CanvasFormat, prompt: str
    ) -> list[Element]:
        """Add a full-frame generated image above existing content."""
        image = self.generate_image(prompt, fmt.aspect_ratio)
        if not image:
            return list(elements)
        return add_element(elements, self._backdrop(elements, fmt, image))

    def _backdrop(self, elements: list[Element], fmt: CanvasFormat, image: str, **style) -> Element:
        return new_element(
            ElementKind.IMAGE, fmt, elements,
            x=0, y=0, width=fmt.width, height=fmt.height, content=image, **style,
        )
