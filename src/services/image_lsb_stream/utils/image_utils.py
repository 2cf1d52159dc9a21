"""
Image utility functions for steganography operations
"""

import httpx
from io import BytesIO
from typing import Optional
from PIL import Image


def load_image_from_input(file: Optional[BytesIO] = None, url: Optional[str] = None) -> Image.Image:
    """
    Load an image from either a file object or URL

    Args:
        file: BytesIO object containing image data
        url: URL to fetch image from

    Returns:
        PIL Image object

    Raises:
        ValueError: If neither file nor url is provided
    """
    if file is not None:
        return Image.open(file)
    if url is not None:
        with httpx.Client(timeout=30) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return Image.open(BytesIO(resp.content))
    raise ValueError("Provide file or url")


def prepare_carrier(image: Image.Image) -> Image.Image:
    """
    Return a carrier the embedding stream can write to

    RGB and RGBA images are copied as-is, anything with transparency is
    converted to RGBA and everything else to RGB.
    """
    if image.mode in ("RGB", "RGBA"):
        return image.copy()
    if image.mode in ("LA", "PA") or (image.mode == "P" and "transparency" in image.info):
        return image.convert("RGBA")
    return image.convert("RGB")


def calculate_pixel_count(image: Image.Image) -> int:
    width, height = image.size
    return width * height
