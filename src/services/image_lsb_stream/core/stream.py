"""
Sequential embedding stream over a caller-owned image
"""

import logging
from typing import Iterable, Optional

from PIL import Image

from ..models.stream_models import StreamConfig, StreamState
from .canvas import Canvas
from .errors import StreamClosedError
from .header import DataHeader, HeaderProvider
from .negotiator import BASELINE_BITS_PER_CHANNEL, HeaderNegotiator
from .writer import PixelWriter


logger = logging.getLogger(__name__)


class EmbeddingStream:
    """
    Embeds bytes into the low bits of an image's RGB channels.

    The image is borrowed, not copied: every commit mutates it in place, and
    the caller must not touch it while the stream is open. Construction plans
    the depth and writes the data header, so by the time the constructor
    returns the stream is ready for exactly ``payload_length`` payload bytes.

    Errors leave already committed pixels modified; snapshot the image first
    if you need to roll back.

    Args:
        image: RGB/RGBA/RGBX carrier image
        payload_length: Number of payload bytes the caller will write
        config: Stream configuration (max bits per channel, header flags)
        header_provider: Header collaborator, DataHeader by default

    Raises:
        InvalidCarrierError: If the image is missing or not direct RGB
        InsufficientCapacityError: If the payload cannot fit
    """

    def __init__(
        self,
        image: Optional[Image.Image],
        payload_length: int,
        config: Optional[StreamConfig] = None,
        header_provider: Optional[HeaderProvider] = None,
    ):
        if payload_length < 0:
            raise ValueError("payload_length must not be negative")

        self._state = StreamState.CONSTRUCTING
        self._canvas = Canvas(image)
        self._payload_length = payload_length
        self._config = config or StreamConfig()
        self._header_provider = header_provider or DataHeader()
        self._bytes_written = 0

        self._writer = PixelWriter(self._canvas, BASELINE_BITS_PER_CHANNEL)
        negotiator = HeaderNegotiator(self._header_provider, self._config)
        self._bits_per_channel = negotiator.negotiate(self._writer, payload_length)
        self._state = StreamState.STREAMING

    @property
    def payload_length(self) -> int:
        return self._payload_length

    @property
    def bits_per_channel(self) -> int:
        return self._bits_per_channel

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    @property
    def closed(self) -> bool:
        return self._state is StreamState.CLOSED

    def write(self, value: int) -> None:
        """
        Write one byte (0-255)

        Raises:
            StreamClosedError: If the stream is closed
            InsufficientCapacityError: If the image runs out of pixels
        """
        if self.closed:
            raise StreamClosedError()
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value out of range: {value}")
        self._writer.write_byte(value)
        self._bytes_written += 1

    def write_bytes(self, data: Iterable[int]) -> None:
        for value in data:
            self.write(value)

    def flush(self) -> None:
        """Commit pending bits without padding or advancing to the next pixel"""
        if self.closed:
            return
        self._writer.flush()

    def close(self) -> None:
        if self.closed:
            return
        if self._bytes_written != self._payload_length:
            logger.warning(
                "Closing stream after %d bytes, declared payload length was %d",
                self._bytes_written, self._payload_length,
            )
        self._writer.finish_group()
        self._state = StreamState.CLOSED

    def current_image(self) -> Image.Image:
        """Flush pending bits and return the (same, mutated) carrier image"""
        self.flush()
        return self._canvas.image

    def __enter__(self) -> "EmbeddingStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self._state = StreamState.CLOSED
