"""
Data header written ahead of the payload at 1 bit per channel
"""

import struct
from abc import ABC, abstractmethod

from ..models.stream_models import StegoHeader, StreamConfig
from .errors import HeaderFormatError


MAGIC = b"LSBS1"
VERSION = 1
_FIELDS = ">BIBBB"  # version, payload length, bits per channel, compressed, encrypted


class HeaderProvider(ABC):
    """Produces the opaque, fixed-size header the embedding stream writes first"""

    @abstractmethod
    def header_size(self) -> int:
        """Size of the header in bytes"""

    @abstractmethod
    def header_bytes(self, payload_length: int, bits_per_channel: int, config: StreamConfig) -> bytes:
        """Build the header for a payload embedded at the given depth"""

    @abstractmethod
    def parse(self, raw: bytes) -> StegoHeader:
        """Parse a header read back from an image"""


class DataHeader(HeaderProvider):
    """
    Fixed 13-byte header: magic, version, payload length, bits per channel
    and the compression/encryption flags
    """

    def header_size(self) -> int:
        return len(MAGIC) + struct.calcsize(_FIELDS)

    def header_bytes(self, payload_length: int, bits_per_channel: int, config: StreamConfig) -> bytes:
        return MAGIC + struct.pack(
            _FIELDS,
            VERSION,
            payload_length,
            bits_per_channel,
            int(config.use_compression),
            int(config.use_encryption),
        )

    def parse(self, raw: bytes) -> StegoHeader:
        """
        Parse header bytes

        Raises:
            HeaderFormatError: If magic, version or depth are invalid
        """
        if len(raw) < self.header_size() or not raw.startswith(MAGIC):
            raise HeaderFormatError(f"Invalid stego header: expected {MAGIC!r}")

        version, payload_length, bits_per_channel, compressed, encrypted = struct.unpack(
            _FIELDS, raw[len(MAGIC):self.header_size()]
        )
        if version != VERSION:
            raise HeaderFormatError(f"Unsupported header version: {version}")
        if not 1 <= bits_per_channel <= 8:
            raise HeaderFormatError(f"Invalid bits per channel in header: {bits_per_channel}")

        return StegoHeader(
            payload_length=payload_length,
            bits_per_channel=bits_per_channel,
            compressed=bool(compressed),
            encrypted=bool(encrypted),
        )
