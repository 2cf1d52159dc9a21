"""
Tests for the fixed-size data header.
"""
import pytest

from src.services.image_lsb_stream import DataHeader, HeaderFormatError, StreamConfig
from src.services.image_lsb_stream.core.header import MAGIC


def test_header_size_is_fixed():
    header = DataHeader()
    assert header.header_size() == 13
    raw = header.header_bytes(123456, 3, StreamConfig())
    assert len(raw) == header.header_size()
    assert raw.startswith(MAGIC)


def test_header_parse_round_trip():
    header = DataHeader()
    config = StreamConfig(max_bits_per_channel=5, use_compression=True, use_encryption=True)
    parsed = header.parse(header.header_bytes(77, 4, config))

    assert parsed.payload_length == 77
    assert parsed.bits_per_channel == 4
    assert parsed.compressed is True
    assert parsed.encrypted is True


def test_header_rejects_bad_magic():
    with pytest.raises(HeaderFormatError):
        DataHeader().parse(b"X" * 13)


def test_header_rejects_short_input():
    with pytest.raises(HeaderFormatError):
        DataHeader().parse(MAGIC)


def test_header_rejects_bad_version():
    raw = bytearray(DataHeader().header_bytes(1, 1, StreamConfig()))
    raw[len(MAGIC)] = 9
    with pytest.raises(HeaderFormatError):
        DataHeader().parse(bytes(raw))


def test_header_rejects_bad_depth():
    raw = bytearray(DataHeader().header_bytes(1, 1, StreamConfig()))
    raw[len(MAGIC) + 5] = 0
    with pytest.raises(HeaderFormatError):
        DataHeader().parse(bytes(raw))
