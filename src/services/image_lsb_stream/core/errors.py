"""
Exception types raised by the embedding and extraction streams
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_CARRIER = "invalid_carrier"
    INSUFFICIENT_CAPACITY = "insufficient_capacity"
    STREAM_CLOSED = "stream_closed"
    HEADER_FORMAT = "header_format"


class StegoStreamError(ValueError):
    """Base class for stream errors. Subclasses set ``kind``."""

    kind: ErrorKind


class InvalidCarrierError(StegoStreamError):
    """Image is missing or has no direct RGB channels (e.g. palette mode)"""

    kind = ErrorKind.INVALID_CARRIER

    def __init__(self, mode: Optional[str] = None, message: str = ""):
        self.mode = mode
        if not message:
            if mode is None:
                message = "Carrier image is required"
            else:
                message = f"Unsupported carrier image mode: {mode}"
        super().__init__(message)


class InsufficientCapacityError(StegoStreamError):
    """Image too small for the data being embedded"""

    kind = ErrorKind.INSUFFICIENT_CAPACITY

    def __init__(self, required: Optional[int] = None, available: Optional[int] = None, message: str = ""):
        self.required = required
        self.available = available
        if not message:
            if required is not None and available is not None:
                message = f"Insufficient image capacity: need {required} bytes, have {available} bytes"
            else:
                message = "Insufficient image capacity"
        super().__init__(message)


class StreamClosedError(StegoStreamError):
    kind = ErrorKind.STREAM_CLOSED

    def __init__(self, message: str = "Write to a closed embedding stream"):
        super().__init__(message)


class HeaderFormatError(StegoStreamError):
    """No valid data header found in the image"""

    kind = ErrorKind.HEADER_FORMAT
