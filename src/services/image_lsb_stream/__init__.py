"""
Image LSB Stream Service - adaptive-depth LSB embedding

- Streaming embedder that picks the smallest bits-per-channel depth (1-8)
  that fits the payload
- Fixed 1-bit-per-channel data header so readers can bootstrap the depth
- Matching extraction stream
- Optional compression and password-based encryption
"""

from .core.errors import (
    ErrorKind,
    HeaderFormatError,
    InsufficientCapacityError,
    InvalidCarrierError,
    StegoStreamError,
    StreamClosedError,
)
from .core.header import DataHeader, HeaderProvider
from .core.reader import ExtractionStream
from .core.stream import EmbeddingStream
from .models.stream_models import StreamConfig, StreamState

__version__ = "1.0.0"
__author__ = "Image Lab Team"

__all__ = [
    "DataHeader",
    "EmbeddingStream",
    "ErrorKind",
    "ExtractionStream",
    "HeaderFormatError",
    "HeaderProvider",
    "InsufficientCapacityError",
    "InvalidCarrierError",
    "StegoStreamError",
    "StreamClosedError",
    "StreamConfig",
    "StreamState",
]
