"""Signature capture and PNG data-URL encoding.

A ``SignaturePad`` collects pen strokes (lists of points), renders them onto
a transparent canvas with Pillow and exports the trimmed image as a
``data:image/png;base64,...`` URL, which is what journal entries store.
"""

from __future__ import annotations

import base64
import binascii
import io
from collections.abc import Iterable
from pathlib import Path

from loguru import logger
from PIL import Image, ImageDraw, UnidentifiedImageError

from .core.exceptions import ValidationError

PNG_DATA_URL_PREFIX = "data:image/png;base64,"

# Greyscale level at or above which a pixel counts as paper, not ink.
_INK_THRESHOLD = 250

Point = tuple[float, float]


class SignaturePad:
    """An in-memory drawing surface for one signature."""

    def __init__(self, width: int = 500, height: int = 200, pen_width: int = 2, pen_color: str = "black"):
        self.width = width
        self.height = height
        self.pen_width = pen_width
        self.pen_color = pen_color
        self._strokes: list[list[Point]] = []

    @property
    def strokes(self) -> list[list[Point]]:
        return [list(stroke) for stroke in self._strokes]

    def add_stroke(self, points: Iterable[Point]) -> None:
        stroke = [(float(x), float(y)) for x, y in points]
        if stroke:
            self._strokes.append(stroke)

    def is_empty(self) -> bool:
        return not self._strokes

    def clear(self) -> None:
        self._strokes = []

    def render(self) -> Image.Image:
        """Draw all strokes onto a transparent RGBA canvas."""
        image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)
        radius = self.pen_width / 2
        for stroke in self._strokes:
            if len(stroke) == 1:
                x, y = stroke[0]
                draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=self.pen_color)
            else:
                draw.line(stroke, fill=self.pen_color, width=self.pen_width, joint="curve")
        return image

    def trimmed(self) -> Image.Image:
        """The rendered canvas cropped to the drawn area."""
        image = self.render()
        bbox = image.getchannel("A").getbbox()
        return image.crop(bbox) if bbox else image

    def to_data_url(self) -> str:
        if self.is_empty():
            raise ValidationError("Please provide a signature.")
        return image_to_data_url(self.trimmed())


def image_to_data_url(image: Image.Image) -> str:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return PNG_DATA_URL_PREFIX + base64.b64encode(buffer.getvalue()).decode("ascii")


def load_image_data_url(path: str | Path) -> str:
    """Read an image file (any format Pillow opens) as a PNG data URL."""
    with Image.open(Path(path).expanduser()) as image:
        return image_to_data_url(image.convert("RGBA"))


def decode_data_url(data_url: str) -> Image.Image:
    """Decode a PNG data URL into a Pillow image.

    Raises:
        ValueError: not a base64 PNG data URL, or undecodable image data.
    """
    if not data_url.startswith(PNG_DATA_URL_PREFIX):
        raise ValueError("Signature must be a base64 PNG data URL.")
    try:
        raw = base64.b64decode(data_url[len(PNG_DATA_URL_PREFIX) :], validate=True)
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (binascii.Error, UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Signature image could not be decoded: {e}") from e
    return image


def is_blank_data_url(data_url: str) -> bool:
    """True unless data_url is a decodable PNG with some ink on it.

    The image is flattened onto white; it is blank when no pixel is darker
    than ``_INK_THRESHOLD``.
    """
    try:
        image = decode_data_url(data_url)
    except ValueError as e:
        logger.debug(f"Treating signature as blank: {e}")
        return True

    rgba = image.convert("RGBA")
    flattened = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
    flattened.alpha_composite(rgba)
    darkest, _ = flattened.convert("L").getextrema()
    return darkest >= _INK_THRESHOLD
