"""A rectangular grid of colored pixels."""

from __future__ import annotations

from raytracer.color import Color


class Canvas:
    """A ``width`` by ``height`` image stored row by row."""

    def __init__(self, width: int, height: int, color: Color | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        fill = color if color is not None else Color.black()
        self.pixels: list[Color] = [fill] * (width * height)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Paint the pixel at column ``x`` and row ``y``."""
        self.pixels[self._index(x, y)] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the color of the pixel at column ``x`` and row ``y``."""
        return self.pixels[self._index(x, y)]

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas"
            )
        return y * self.width + x

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"