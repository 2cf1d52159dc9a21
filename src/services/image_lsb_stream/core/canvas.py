"""
Borrowed pixel handle over a caller-owned Pillow image
"""

from typing import Optional, Tuple

from PIL import Image

from .errors import InvalidCarrierError


PALETTE_MODES = ("P", "PA")
SUPPORTED_MODES = ("RGB", "RGBA", "RGBX")


def validate_carrier(image: Optional[Image.Image]) -> Image.Image:
    """
    Check that an image can carry LSB data through direct channel masking

    Raises:
        InvalidCarrierError: If the image is missing, palette-indexed or has
            no direct 8-bit RGB channels
    """
    if image is None:
        raise InvalidCarrierError()
    if image.mode in PALETTE_MODES:
        raise InvalidCarrierError(image.mode, "Palette-indexed images cannot carry LSB data")
    if image.mode not in SUPPORTED_MODES:
        raise InvalidCarrierError(image.mode)
    return image


class Canvas:
    """
    Exclusive-access view of an image's pixels as packed 0xRRGGBB values.

    Writes go straight into the wrapped image; alpha and padding bytes are
    carried over untouched.
    """

    def __init__(self, image: Optional[Image.Image]):
        self.image = validate_carrier(image)
        self.width, self.height = self.image.size

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def get_rgb(self, x: int, y: int) -> int:
        r, g, b = self.image.getpixel((x, y))[:3]
        return (r << 16) | (g << 8) | b

    def set_rgb(self, x: int, y: int, rgb: int) -> None:
        extra: Tuple[int, ...] = tuple(self.image.getpixel((x, y))[3:])
        value = ((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF) + extra
        self.image.putpixel((x, y), value)
