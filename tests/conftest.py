import random
import struct

import pytest
from PIL import Image

from src.services.image_lsb_stream.core.errors import HeaderFormatError
from src.services.image_lsb_stream.core.header import HeaderProvider
from src.services.image_lsb_stream.models.stream_models import StegoHeader


class FixedHeader(HeaderProvider):
    """Minimal header of a configurable size for exercising the stream directly"""

    def __init__(self, size: int = 8):
        self.size = size

    def header_size(self) -> int:
        return self.size

    def header_bytes(self, payload_length, bits_per_channel, config) -> bytes:
        if self.size < 5:
            return bytes(self.size)
        body = struct.pack(">IB", payload_length, bits_per_channel)
        return b"H" * (self.size - len(body)) + body

    def parse(self, raw: bytes) -> StegoHeader:
        if self.size < 5 or not raw.startswith(b"H" * (self.size - 5)):
            raise HeaderFormatError("bad test header")
        payload_length, bits_per_channel = struct.unpack(">IB", raw[self.size - 5:self.size])
        return StegoHeader(payload_length=payload_length, bits_per_channel=bits_per_channel)


def make_noise_image(width: int, height: int, mode: str = "RGB", seed: int = 7) -> Image.Image:
    rng = random.Random(seed)
    channels = len(mode)
    data = bytes(rng.getrandbits(8) for _ in range(width * height * channels))
    return Image.frombytes(mode, (width, height), data)


@pytest.fixture
def noise_image():
    return make_noise_image


@pytest.fixture
def fixed_header():
    return FixedHeader


@pytest.fixture
def payload():
    rng = random.Random(42)
    return lambda n: bytes(rng.getrandbits(8) for _ in range(n))
