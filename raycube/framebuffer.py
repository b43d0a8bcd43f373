"""An in-memory image of 0xRRGGBB pixels with simple drawing."""

from __future__ import annotations

from array import array
from typing import Iterator

from raycube.state import HEIGHT, WIDTH


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the integer points of the line from (x0, y0) to (x1, y1)."""
    dist_x = abs(x1 - x0)
    dist_y = abs(y1 - y0)
    dir_x = 1 if x0 < x1 else -1
    dir_y = 1 if y0 < y1 else -1
    error = dist_x - dist_y
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        error2 = 2 * error
        if error2 > -dist_y:
            error -= dist_y
            x0 += dir_x
        if error2 < dist_x:
            error += dist_x
            y0 += dir_y


class FrameBuffer:
    """A width x height image; pixels holds row-major 0xRRGGBB values."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame size must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Blacken the whole image."""
        for index in range(len(self.pixels)):
            self.pixels[index] = 0

    def draw_square(self, x: int, y: int, size: int, color: int) -> None:
        """Fill a size x size square whose top-left corner is (x, y)."""
        for dx in range(size):
            for dy in range(size):
                self.put_pixel(x + dx, y + dy, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two integer points."""
        for x, y in bresenham(x0, y0, x1, y1):
            self.put_pixel(x, y, color)