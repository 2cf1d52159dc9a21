"""
Capacity planning for adaptive-depth LSB embedding
"""

from .errors import InsufficientCapacityError


def capacity_bytes(pixel_count: int, bits_per_channel: int) -> int:
    """
    Number of bytes the planner assumes an image can carry at a given depth

    Args:
        pixel_count: Total pixels in the carrier (width * height)
        bits_per_channel: Bits per channel used

    Returns:
        floor(pixel_count * bits_per_channel / 8)
    """
    return (pixel_count * bits_per_channel) // 8


def plan_bits_per_channel(
    pixel_count: int,
    payload_length: int,
    header_size: int,
    max_bits_per_channel: int,
) -> int:
    """
    Find the smallest bits-per-channel value that fits header + payload

    Depths are tried in ascending order starting at 1; the first depth that
    satisfies the capacity inequality wins.

    Args:
        pixel_count: Total pixels in the carrier
        payload_length: Declared payload length in bytes
        header_size: Size of the data header in bytes
        max_bits_per_channel: Upper bound on the depth

    Returns:
        Negotiated bits per channel

    Raises:
        InsufficientCapacityError: If no depth up to the maximum fits
    """
    required = payload_length + header_size
    bits_per_channel = 1
    while capacity_bytes(pixel_count, bits_per_channel) < required:
        bits_per_channel += 1
        if bits_per_channel > max_bits_per_channel:
            raise InsufficientCapacityError(
                required, capacity_bytes(pixel_count, max_bits_per_channel)
            )
    return bits_per_channel


def max_payload_length(pixel_count: int, bits_per_channel: int, header_size: int) -> int:
    """Largest payload the planner accepts at the given depth"""
    return max(0, capacity_bytes(pixel_count, bits_per_channel) - header_size)
