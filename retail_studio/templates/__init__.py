"""Template builder registry."""

from typing import Type

from ..models.canvas import CanvasFormat
from ..models.element import Element
from .base import BuildContext, TemplateBuilder

_BUILDERS: dict[str, Type[TemplateBuilder]] = {}


def _ensure_builders_loaded():
    """Import all builder modules to trigger registration."""
    from . import value_tiles  # noqa: F401
    from . import tags  # noqa: F401
    from . import lep  # noqa: F401


def register(path: str):
    """Decorator to register a template builder."""
    def decorator(cls):
        _BUILDERS[path] = cls
        return cls
    return decorator


def get_builder_class(path: str) -> Type[TemplateBuilder]:
    """Get builder class by path."""
    _ensure_builders_loaded()
    if path not in _BUILDERS:
        raise ValueError(f"Unknown template builder: {path}")
    return _BUILDERS[path]


def list_builders() -> list[str]:
    """List all registered builders."""
    _ensure_builders_loaded()
    return list(_BUILDERS.keys())


def build(path: str, elements: list[Element], fmt: CanvasFormat, **options) -> list[Element]:
    """Build the named asset against a snapshot. Returns only the new elements."""
    builder = get_builder_class(path)()
    return builder.build(BuildContext(elements=list(elements), fmt=fmt, options=options))


__all__ = [
    "BuildContext",
    "TemplateBuilder",
    "register",
    "get_builder_class",
    "list_builders",
    "build",
]
