"""Business logic services."""

from .assets import AssetService, ImageAsset
from .compliance import SemanticComplianceService
from .creative import CreativeService, CreativeStrategy

__all__ = [
    "AssetService",
    "ImageAsset",
    "SemanticComplianceService",
    "CreativeService",
    "CreativeStrategy",
]
