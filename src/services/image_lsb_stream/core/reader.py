"""
Extraction stream: reads back data written by EmbeddingStream
"""

from typing import List, Optional

from PIL import Image

from ..models.stream_models import StegoHeader
from .canvas import Canvas
from .codec import split_channels
from .cursor import Cursor
from .errors import InsufficientCapacityError
from .header import DataHeader, HeaderProvider
from .negotiator import BASELINE_BITS_PER_CHANNEL


class ExtractionStream:
    """
    Reads the header at 1 bit per channel, then the payload at the depth the
    header records.

    Args:
        image: Image produced by EmbeddingStream
        header_provider: Must match the provider used for embedding

    Raises:
        InvalidCarrierError: If the image is missing or not direct RGB
        HeaderFormatError: If no valid header is found
        InsufficientCapacityError: If the image ends inside the header
    """

    def __init__(self, image: Optional[Image.Image], header_provider: Optional[HeaderProvider] = None):
        self._canvas = Canvas(image)
        self._header_provider = header_provider or DataHeader()
        self._cursor = Cursor(self._canvas.width, self._canvas.height)
        self._bits_per_channel = BASELINE_BITS_PER_CHANNEL
        self._pending: List[int] = []

        raw = self._read_raw(self._header_provider.header_size())
        # header ends on a pixel boundary; drop the padding bits
        self._pending = []
        self.header: StegoHeader = self._header_provider.parse(raw)
        self._bits_per_channel = self.header.bits_per_channel
        self._remaining = self.header.payload_length

    @property
    def payload_length(self) -> int:
        return self.header.payload_length

    @property
    def bits_per_channel(self) -> int:
        return self._bits_per_channel

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` payload bytes, or everything left if size < 0"""
        if size < 0 or size > self._remaining:
            size = self._remaining
        data = self._read_raw(size)
        self._remaining -= size
        return data

    def _read_raw(self, size: int) -> bytes:
        out = bytearray()
        for _ in range(size):
            while len(self._pending) < 8:
                self._load_pixel()
            value = 0
            for bit in self._pending[:8]:
                value = (value << 1) | bit
            del self._pending[:8]
            out.append(value)
        return bytes(out)

    def _load_pixel(self) -> None:
        if self._cursor.exhausted:
            raise InsufficientCapacityError(message="Image exhausted while reading data")
        x, y = self._cursor.position
        self._pending.extend(split_channels(self._canvas.get_rgb(x, y), self._bits_per_channel))
        self._cursor.advance()
