"""
Tests for the service layer: compression, encryption, hide/reveal and capacity.
"""
import numpy as np
import pytest
from PIL import Image

from src.services.image_lsb_stream.core.compression import compress_payload, decompress_payload
from src.services.image_lsb_stream.core.encryption import seal, unseal, unseal_if_needed
from src.services.image_lsb_stream.core.errors import InsufficientCapacityError
from src.services.image_lsb_stream.core.service import ImageStreamStegoService
from src.services.image_lsb_stream.models.stream_models import StegoOptions


@pytest.fixture
def service():
    return ImageStreamStegoService()


# ============================================================================
# Payload pipeline
# ============================================================================

def test_compression_only_when_smaller():
    data = b"a" * 500
    compressed, was_compressed = compress_payload(data)
    assert was_compressed
    assert len(compressed) < len(data)
    assert decompress_payload(compressed, True) == data

    small, was_compressed = compress_payload(b"\x01")
    assert not was_compressed
    assert small == b"\x01"


def test_decompress_invalid_data():
    with pytest.raises(ValueError):
        decompress_payload(b"not zlib", True)


def test_seal_unseal_round_trip():
    sealed = seal(b"secret", "pw")
    assert sealed != b"secret"
    assert unseal(sealed, "pw") == b"secret"


def test_unseal_wrong_password():
    sealed = seal(b"secret", "pw")
    with pytest.raises(ValueError, match="Invalid password"):
        unseal(sealed, "other")


def test_unseal_requires_password_for_encrypted_payload():
    with pytest.raises(ValueError, match="password is required"):
        unseal_if_needed(b"whatever", None, True)


# ============================================================================
# Service
# ============================================================================

def test_hide_and_reveal_text(service, noise_image):
    cover = noise_image(64, 64)
    original = np.array(cover).copy()
    text = "The quick brown fox jumps over the lazy dog. " * 10

    stego, result = service.hide(cover, text.encode("utf-8"), StegoOptions(max_bits_per_channel=4))

    assert stego is not cover
    assert np.array_equal(np.array(cover), original)
    assert result.compression == "zlib"
    assert result.compression_ratio > 1.0
    assert not result.encrypted

    revealed = service.reveal(stego)
    assert revealed.data.decode("utf-8") == text
    assert revealed.was_compressed
    assert revealed.bits_per_channel == result.bits_per_channel


def test_hide_and_reveal_with_password(service, noise_image, payload):
    cover = noise_image(64, 64)
    data = payload(300)

    stego, result = service.hide(cover, data, StegoOptions(password="hunter2", compress=False))
    assert result.encrypted
    assert result.encryption == "AES-GCM"
    assert result.payload_size_bytes == 300 + 16 + 12 + 16

    assert service.reveal(stego, "hunter2").data == data
    with pytest.raises(ValueError):
        service.reveal(stego, "wrong")
    with pytest.raises(ValueError):
        service.reveal(stego)


def test_hide_palette_cover_is_converted(service):
    cover = Image.new("RGB", (48, 48), (200, 100, 50)).convert("P")
    stego, _ = service.hide(cover, b"palette", StegoOptions())
    assert stego.mode == "RGB"
    assert service.reveal(stego).data == b"palette"


def test_hide_empty_payload_rejected(service, noise_image):
    with pytest.raises(ValueError):
        service.hide(noise_image(16, 16), b"", StegoOptions())


def test_hide_too_large(service, noise_image, payload):
    with pytest.raises(InsufficientCapacityError):
        service.hide(noise_image(8, 8), payload(100), StegoOptions(max_bits_per_channel=2, compress=False))


def test_capacity_table(service, noise_image):
    result = service.capacity(noise_image(10, 10), 4)
    assert result.width == 10
    assert result.height == 10
    assert result.header_size_bytes == 13
    assert result.payload_bytes_per_depth == {1: 0, 2: 12, 3: 24, 4: 37}
    assert result.max_payload_bytes == 37


def test_capacity_rejects_bad_depth(service, noise_image):
    with pytest.raises(ValueError):
        service.capacity(noise_image(10, 10), 9)
