"""
Header negotiation: pick the payload depth and embed the header at depth 1
"""

import logging

from ..models.stream_models import StreamConfig
from .capacity import plan_bits_per_channel
from .header import HeaderProvider
from .writer import PixelWriter


logger = logging.getLogger(__name__)

BASELINE_BITS_PER_CHANNEL = 1


class HeaderNegotiator:
    """
    Writes the data header so that a reader can recover it without knowing
    the negotiated depth.

    The header always goes in at BASELINE_BITS_PER_CHANNEL starting at pixel
    (0, 0). The payload starts on the next whole pixel at the negotiated depth.
    """

    def __init__(self, header_provider: HeaderProvider, config: StreamConfig):
        self.header_provider = header_provider
        self.config = config

    def plan(self, pixel_count: int, payload_length: int) -> int:
        return plan_bits_per_channel(
            pixel_count,
            payload_length,
            self.header_provider.header_size(),
            self.config.max_bits_per_channel,
        )

    def negotiate(self, writer: PixelWriter, payload_length: int) -> int:
        """
        Plan the depth, embed the header and switch the writer to the new depth

        Args:
            writer: Writer positioned at (0, 0) with a baseline-depth accumulator
            payload_length: Declared payload length in bytes

        Returns:
            Negotiated bits per channel

        Raises:
            InsufficientCapacityError: If the payload cannot fit
        """
        bits_per_channel = self.plan(writer.canvas.pixel_count, payload_length)
        logger.debug(
            "Negotiated %d bits per channel for %d payload bytes in %dx%d image",
            bits_per_channel, payload_length, writer.canvas.width, writer.canvas.height,
        )

        header = self.header_provider.header_bytes(payload_length, bits_per_channel, self.config)
        for value in header:
            writer.write_byte(value)
        writer.finish_group()

        writer.resize(bits_per_channel)
        return bits_per_channel
