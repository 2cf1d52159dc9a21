"""
Byte-to-pixel pipeline shared by header and payload writes
"""

from .bitset import BitAccumulator, byte_to_bits
from .canvas import Canvas
from .codec import commit_pixel
from .cursor import Cursor


class PixelWriter:
    """Feeds bytes through the accumulator and commits full groups in raster order"""

    def __init__(self, canvas: Canvas, bits_per_channel: int = 1):
        self.canvas = canvas
        self.cursor = Cursor(canvas.width, canvas.height)
        self.accumulator = BitAccumulator(bits_per_channel)

    @property
    def bits_per_channel(self) -> int:
        return self.accumulator.bits_per_channel

    def write_byte(self, value: int) -> None:
        for bit in byte_to_bits(value):
            if self.accumulator.push(bit):
                self.accumulator.reset()
                self._commit_and_advance()

    def flush(self) -> None:
        """Commit the pending group as-is; the cursor stays on the same pixel"""
        if self.accumulator.has_pending():
            commit_pixel(self.canvas, self.cursor, self.accumulator)

    def finish_group(self) -> None:
        """Zero-pad a partial group, commit it and move to the next pixel"""
        if self.accumulator.has_pending():
            self.accumulator.pad()
            self.accumulator.reset()
            self._commit_and_advance()

    def resize(self, bits_per_channel: int) -> None:
        self.accumulator.resize(bits_per_channel)

    def _commit_and_advance(self) -> None:
        commit_pixel(self.canvas, self.cursor, self.accumulator)
        self.cursor.advance()
