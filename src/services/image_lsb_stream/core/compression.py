"""
Payload compression applied before embedding
"""

import zlib
from typing import Tuple


def compress_payload(data: bytes, level: int = 9) -> Tuple[bytes, bool]:
    """
    Compress with zlib, keeping the original if compression does not help

    Returns:
        Tuple of (payload, was_compressed)
    """
    if level < 1 or level > 9:
        level = 9

    compressed = zlib.compress(data, level=level)
    if len(compressed) < len(data):
        return compressed, True
    return data, False


def decompress_payload(data: bytes, was_compressed: bool) -> bytes:
    """
    Raises:
        ValueError: If the payload is not valid zlib data
    """
    if not was_compressed:
        return data
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise ValueError(f"Failed to decompress payload: {e}") from e


def compression_ratio(original_size: int, compressed_size: int) -> float:
    if compressed_size == 0:
        return 1.0
    return original_size / compressed_size
