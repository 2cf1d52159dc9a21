"""
Main service class for adaptive-depth LSB steganography
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from ..models.stream_models import (
    StegoCapacityResult,
    StegoHideResult,
    StegoOptions,
    StegoRevealResult,
    StreamConfig,
)
from ..utils.image_utils import calculate_pixel_count, prepare_carrier
from ..utils.validation import validate_max_bits_per_channel, validate_payload
from .capacity import max_payload_length
from .compression import compress_payload, compression_ratio, decompress_payload
from .encryption import seal_if_needed, unseal_if_needed
from .header import DataHeader, HeaderProvider
from .reader import ExtractionStream
from .stream import EmbeddingStream


logger = logging.getLogger(__name__)


class ImageStreamStegoService:
    """
    High-level interface over EmbeddingStream / ExtractionStream

    Payloads are optionally compressed and encrypted before they are handed to
    the stream; the header records which of the two was applied.
    """

    def __init__(self, header_provider: Optional[HeaderProvider] = None):
        self.header_provider = header_provider or DataHeader()

    def capacity(self, image: Image.Image, max_bits_per_channel: int) -> StegoCapacityResult:
        """
        Report how many payload bytes fit at each depth up to the maximum

        Args:
            image: Candidate cover image
            max_bits_per_channel: Upper bound on the depth

        Returns:
            StegoCapacityResult with the per-depth table
        """
        validate_max_bits_per_channel(max_bits_per_channel)
        pixel_count = calculate_pixel_count(image)
        header_size = self.header_provider.header_size()
        per_depth = {
            depth: max_payload_length(pixel_count, depth, header_size)
            for depth in range(1, max_bits_per_channel + 1)
        }
        width, height = image.size
        return StegoCapacityResult(
            width=width,
            height=height,
            header_size_bytes=header_size,
            max_bits_per_channel=max_bits_per_channel,
            max_payload_bytes=per_depth[max_bits_per_channel],
            payload_bytes_per_depth=per_depth,
        )

    def hide(
        self,
        cover: Image.Image,
        data: bytes,
        options: StegoOptions,
    ) -> Tuple[Image.Image, StegoHideResult]:
        """
        Hide data in a copy of the cover image

        Args:
            cover: Cover image (left untouched)
            data: Raw data to hide
            options: Depth limit, password and compression settings

        Returns:
            Tuple of (stego_image, result_metadata)

        Raises:
            InvalidCarrierError: If the cover cannot carry data
            InsufficientCapacityError: If the payload does not fit
        """
        validate_payload(data)

        payload = data
        is_compressed = False
        if options.compress:
            payload, is_compressed = compress_payload(data)
        ratio = compression_ratio(len(data), len(payload)) if is_compressed else None
        payload = seal_if_needed(payload, options.password)

        config = StreamConfig(
            max_bits_per_channel=options.max_bits_per_channel,
            use_compression=is_compressed,
            use_encryption=bool(options.password),
        )

        carrier = prepare_carrier(cover)
        with EmbeddingStream(carrier, len(payload), config, self.header_provider) as stream:
            stream.write_bytes(payload)
            bits_per_channel = stream.bits_per_channel
        stego_img = stream.current_image()

        logger.info(
            "Embedded %d payload bytes (%d raw) at %d bits per channel",
            len(payload), len(data), bits_per_channel,
        )

        result = StegoHideResult(
            output_path=Path(options.output_filename or "./stego.png"),
            payload_size_bytes=len(payload),
            overhead_bytes=len(payload) + self.header_provider.header_size() - len(data),
            bits_per_channel=bits_per_channel,
            encrypted=bool(options.password),
            encryption="AES-GCM" if options.password else None,
            kdf="Scrypt" if options.password else None,
            compression="zlib" if is_compressed else None,
            compression_ratio=ratio,
        )
        return stego_img, result

    def reveal(self, stego_image: Image.Image, password: Optional[str] = None) -> StegoRevealResult:
        """
        Recover data hidden by hide()

        Raises:
            HeaderFormatError: If the image carries no data header
            ValueError: If decryption or decompression fails
        """
        reader = ExtractionStream(prepare_carrier(stego_image), self.header_provider)
        header = reader.header
        payload = reader.read()

        plain = unseal_if_needed(payload, password, header.encrypted)
        plain = decompress_payload(plain, header.compressed)

        return StegoRevealResult(
            data=plain,
            size_bytes=len(plain),
            bits_per_channel=header.bits_per_channel,
            was_compressed=header.compressed,
            was_encrypted=header.encrypted,
        )
