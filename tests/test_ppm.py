import pytest

from raytracer.canvas import Canvas
from raytracer.color import Color
from raytracer.ppm import ppm


def test_ppm_pixel_data():
    canvas = Canvas(5, 3)
    canvas.set_pixel(0, 0, Color(1.0, 0.0, 0.0))
    canvas.set_pixel(2, 1, Color(0.0, 0.5, 0.0))
    canvas.set_pixel(4, 2, Color(-0.5, 0.0, 1.0))

    expected_ppm = (
        "P3\n"
        "5 3\n"
        "255\n"
        "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0\n"
        "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0\n"
        "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255\n"
    )
    assert ppm(canvas) == expected_ppm


def test_splits_long_lines_in_ppm_files():
    canvas = Canvas(10, 2, Color(1.0, 0.8, 0.6))

    expected_ppm = (
        "P3\n"
        "10 2\n"
        "255\n"
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204\n"
        "153 255 204 153 255 204 153 255 204 153 255 204 153\n"
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204\n"
        "153 255 204 153 255 204 153 255 204 153 255 204 153\n"
    )
    assert ppm(canvas) == expected_ppm


def test_ppm_files_are_terminated_by_newline_character():
    canvas = Canvas(5, 3)

    assert ppm(canvas).endswith("\n")


def test_no_line_exceeds_seventy_characters():
    canvas = Canvas(40, 3, Color(1.0, 0.8, 0.6))

    assert all(len(line) <= 70 for line in ppm(canvas).splitlines())


def test_values_above_one_are_clamped():
    canvas = Canvas(1, 1, Color(1.5, 2.0, 1.0))

    assert ppm(canvas) == "P3\n1 1\n255\n255 255 255\n"


def test_zero_width_canvas_is_rejected():
    with pytest.raises(ValueError):
        ppm(Canvas(0, 3))