"""Image asset service - turns image bytes or URLs into editor image references."""

import base64
from dataclasses import dataclass
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from ..clients.media import MediaClient
from ..engine.editor import add_elements
from ..models.canvas import CanvasFormat
from ..models.element import Element
from ..templates import build


@dataclass(frozen=True)
class ImageAsset:
    """PNG data URI plus natural pixel size."""
    data_uri: str
    width: int
    height: int


def to_image_asset(image_data: bytes) -> ImageAsset:
    """Re-encode any Pillow-readable image as a PNG data URI."""
    try:
        img = Image.open(BytesIO(image_data))
    except UnidentifiedImageError as e:
        raise ValueError(f"Unsupported image data: {e}") from e

    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA")

    output = BytesIO()
    img.save(output, format="PNG")
    encoded = base64.b64encode(output.getvalue()).decode("ascii")
    return ImageAsset(
        data_uri=f"data:image/png;base64,{encoded}",
        width=img.width,
        height=img.height,
    )


class AssetService:
    """Load images (packshot uploads, remote URLs) as data URIs."""

    def __init__(self, media: MediaClient):
        self.media = media

    def load_image(self, source: str) -> ImageAsset:
        """
        Load an image from a URL or a data URI.

        Args:
            source: http(s) URL or `data:image/...;base64,` URI

        Returns:
            ImageAsset with a PNG data URI and the image's natural size
        """
        if source.startswith("data:"):
            _, _, payload = source.partition(",")
            image_data = base64.b64decode(payload)
        else:
            image_data = self.media.fetch(source)
        return to_image_asset(image_data)

    def add_packshot(self, elements: list[Element], fmt: CanvasFormat, source: str) -> list[Element]:
        """Load an image and add it as a packshot fitted into the standard box."""
        asset = self.load_image(source)
        bundle = build(
            "packshot", elements, fmt,
            image=asset.data_uri, image_width=asset.width, image_height=asset.height,
        )
        return add_elements(elements, bundle)
