"""Host-facing wire format."""

from .serializers import (
    parse_element,
    parse_elements,
    parse_format,
    serialize_element,
    serialize_format,
    serialize_report,
)

__all__ = [
    "parse_element",
    "parse_elements",
    "parse_format",
    "serialize_element",
    "serialize_format",
    "serialize_report",
]
