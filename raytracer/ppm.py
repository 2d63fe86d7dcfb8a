"""Plain-text PPM (P3) serialisation of a canvas."""

from __future__ import annotations

import math
from collections.abc import Iterator

from raytracer.canvas import Canvas
from raytracer.color import Color

MAX_COLOR_VALUE = 255
MAX_LINE_LENGTH = 70


def _component(value: float) -> int:
    clamped = min(max(value, 0.0), float(MAX_COLOR_VALUE))
    return math.floor(clamped + 0.5)


def _row_tokens(row: list[Color]) -> Iterator[str]:
    for pixel in row:
        scaled = pixel * float(MAX_COLOR_VALUE)
        for value in (scaled.r, scaled.g, scaled.b):
            yield str(_component(value))


def _wrap(tokens: Iterator[str]) -> Iterator[str]:
    """Join tokens with spaces, breaking lines before they exceed the limit."""
    line: list[str] = []
    length = 0
    for token in tokens:
        if length + len(token) + 1 > MAX_LINE_LENGTH:
            yield " ".join(line)
            line = []
            length = 0
        line.append(token)
        length += len(token) + 1
    yield " ".join(line)


def ppm(canvas: Canvas) -> str:
    """Render ``canvas`` as the text of a P3 PPM file."""
    if canvas.width <= 0:
        raise ValueError("cannot encode a canvas with zero width")
    header = f"P3\n{canvas.width} {canvas.height}\n{MAX_COLOR_VALUE}"
    body_lines = [
        line
        for start in range(0, len(canvas.pixels), canvas.width)
        for line in _wrap(_row_tokens(canvas.pixels[start : start + canvas.width]))
    ]
    body = "".join(f"{line}\n" for line in body_lines)
    return f"{header}\n{body}"