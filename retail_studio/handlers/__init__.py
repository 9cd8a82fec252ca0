"""Host adapters."""

from .studio import handler

__all__ = ["handler"]
