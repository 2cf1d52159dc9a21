"""
Raster-order pixel cursor
"""

from typing import Tuple


class Cursor:
    """Row-major (x, y) position; y == height means the image is exhausted"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.x = 0
        self.y = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def exhausted(self) -> bool:
        return self.y >= self.height

    def advance(self) -> None:
        self.x += 1
        if self.x == self.width:
            self.x = 0
            self.y += 1

    def __repr__(self) -> str:
        return f"Cursor(x={self.x}, y={self.y}, width={self.width}, height={self.height})"
