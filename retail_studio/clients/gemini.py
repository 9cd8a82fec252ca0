"""Gemini image generation client."""

import logging
import time

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

# Gemini supports a fixed set of ratios; canvas ratios map to the closest one
SUPPORTED_ASPECT_RATIOS = {"1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"}
ASPECT_RATIO_FALLBACKS = {"1.91:1": "16:9"}


class ImageGenerationError(RuntimeError):
    """Gemini returned no image."""

    pass


def to_supported_ratio(aspect_ratio: str) -> str:
    """Map a canvas ratio onto one Gemini accepts."""
    if aspect_ratio in SUPPORTED_ASPECT_RATIOS:
        return aspect_ratio
    return ASPECT_RATIO_FALLBACKS.get(aspect_ratio, "1:1")


class GeminiClient:
    """Client for generating background images via Gemini image models."""

    def __init__(self, api_key: str, model: str = "gemini-3-pro-image-preview"):
        self.client = genai.Client(api_key=api_key)
        self.model = model

    def _call_with_retry(self, func, max_retries=5, retry_codes=(503, 429)):
        """Retry API calls on transient errors with exponential backoff."""
        for attempt in range(max_retries):
            try:
                return func()
            except Exception as e:
                error_str = str(e)
                is_retryable = any(str(code) in error_str for code in retry_codes)

                if not is_retryable or attempt == max_retries - 1:
                    raise

                wait_time = 2 ** attempt  # 1s, 2s, 4s
                logger.warning(
                    f"Gemini API error (attempt {attempt + 1}/{max_retries}), "
                    f"retrying in {wait_time}s: {e}"
                )
                time.sleep(wait_time)

    def generate_image(self, prompt: str, aspect_ratio: str = "1:1") -> bytes:
        """
        Generate an image from a text prompt.

        Args:
            prompt: Full image prompt
            aspect_ratio: Canvas ratio (mapped to a supported Gemini ratio)

        Returns:
            Generated image bytes
        """
        response = self._call_with_retry(
            lambda: self.client.models.generate_content(
                model=self.model,
                contents=[prompt],
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE", "TEXT"],
                    image_config=types.ImageConfig(
                        aspect_ratio=to_supported_ratio(aspect_ratio),
                    ),
                ),
            )
        )

        # Extract generated image from response
        if response.candidates:
            for part in response.candidates[0].content.parts:
                if part.inline_data and part.inline_data.mime_type.startswith("image/"):
                    return part.inline_data.data

        raise ImageGenerationError("No image generated by Gemini")
