"""
Validation utilities for steganography operations
"""


def validate_max_bits_per_channel(max_bits_per_channel: int) -> None:
    """
    Raises:
        ValueError: If max_bits_per_channel is not an integer in 1-8
    """
    if not isinstance(max_bits_per_channel, int) or max_bits_per_channel < 1 or max_bits_per_channel > 8:
        raise ValueError("max_bits_per_channel must be an integer between 1 and 8")


def validate_payload(data: bytes) -> None:
    """
    Raises:
        ValueError: If there is nothing to hide
    """
    if not data:
        raise ValueError("Payload must not be empty")
