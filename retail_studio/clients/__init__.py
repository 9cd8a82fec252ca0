"""API clients for external services."""

from .llm import LLMClient, LLMResponseError
from .gemini import GeminiClient, ImageGenerationError
from .media import MediaClient, MediaDownloadError

__all__ = [
    "LLMClient",
    "LLMResponseError",
    "GeminiClient",
    "ImageGenerationError",
    "MediaClient",
    "MediaDownloadError",
]
