"""
Bit accumulator holding one pixel group (three channel runs) of bits
"""

from typing import List


class BitAccumulator:
    """Fixed-size, position-tracked buffer of 3 * bits_per_channel bits"""

    def __init__(self, bits_per_channel: int = 1):
        self._bits_per_channel = bits_per_channel
        self._bits: List[int] = [0] * (3 * bits_per_channel)
        self._position = 0

    @property
    def bits_per_channel(self) -> int:
        return self._bits_per_channel

    @property
    def position(self) -> int:
        return self._position

    @property
    def bits(self) -> List[int]:
        return self._bits

    def __len__(self) -> int:
        return len(self._bits)

    def push(self, bit: int) -> bool:
        """
        Append a bit at the write position

        Returns:
            True when the accumulator became full; the caller commits the
            group and then calls reset()
        """
        self._bits[self._position] = bit & 1
        self._position += 1
        return self._position == len(self._bits)

    def has_pending(self) -> bool:
        return self._position != 0

    def pad(self) -> None:
        """Zero the bits after the write position"""
        for i in range(self._position, len(self._bits)):
            self._bits[i] = 0

    def reset(self) -> None:
        self._position = 0

    def resize(self, bits_per_channel: int) -> None:
        self._bits_per_channel = bits_per_channel
        self._bits = [0] * (3 * bits_per_channel)
        self._position = 0

    def channel_runs(self) -> List[List[int]]:
        """Split the buffer into the R, G and B runs"""
        n = self._bits_per_channel
        return [self._bits[i * n:(i + 1) * n] for i in range(3)]


def byte_to_bits(value: int) -> List[int]:
    """Split a byte into 8 bits, most significant first"""
    return [(value >> (7 - i)) & 1 for i in range(8)]
