"""
Pixel commit: write an accumulator's channel runs into the low bits of a pixel
"""

from typing import List

from .bitset import BitAccumulator
from .canvas import Canvas
from .cursor import Cursor
from .errors import InsufficientCapacityError


def channel_mask(bits_per_channel: int) -> int:
    """Low-bit mask replicated into the R, G and B byte lanes of 0xRRGGBB"""
    per_byte = (1 << bits_per_channel) - 1
    return (per_byte << 16) | (per_byte << 8) | per_byte


def fold_bits(bits: List[int]) -> int:
    """Fold a run of bits into an integer, most significant first"""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def merge_channels(rgb: int, accumulator: BitAccumulator) -> int:
    """
    Replace the low bits of each channel of a packed pixel

    Args:
        rgb: Packed 0xRRGGBB pixel value
        accumulator: Full accumulator of 3 * bits_per_channel bits

    Returns:
        New packed pixel value
    """
    offset = 0
    for run in accumulator.channel_runs():
        offset = (offset << 8) | fold_bits(run)
    return (rgb & ~channel_mask(accumulator.bits_per_channel) & 0xFFFFFF) | offset


def commit_pixel(canvas: Canvas, cursor: Cursor, accumulator: BitAccumulator) -> None:
    """
    Write the accumulator into the pixel under the cursor

    The cursor is not advanced here.

    Raises:
        InsufficientCapacityError: If the cursor has run off the image
    """
    if cursor.exhausted:
        raise InsufficientCapacityError(message="Image exhausted while embedding data")
    x, y = cursor.position
    canvas.set_rgb(x, y, merge_channels(canvas.get_rgb(x, y), accumulator))


def split_channels(rgb: int, bits_per_channel: int) -> List[int]:
    """Inverse of merge_channels: read the R, G and B runs back as bits"""
    per_byte = (1 << bits_per_channel) - 1
    bits: List[int] = []
    for shift in (16, 8, 0):
        value = (rgb >> shift) & per_byte
        bits.extend((value >> (bits_per_channel - 1 - i)) & 1 for i in range(bits_per_channel))
    return bits
