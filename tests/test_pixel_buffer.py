"""Tests for the pixel buffer accessor."""

from __future__ import annotations

import math

import pytest
from PIL import Image

from color_extractor.models.pixel_buffer import Color, PixelBuffer, color_at
from tests.helpers import make_buffer


def test_color_at_reads_rgba_with_normalized_alpha(rgb_2x2: PixelBuffer) -> None:
    assert color_at(rgb_2x2, 0, 0) == Color(r=255, g=0, b=0, a=1.0)
    assert color_at(rgb_2x2, 0, 1) == Color(r=0, g=255, b=0, a=1.0)
    assert color_at(rgb_2x2, 1, 1) == Color(r=0, g=0, b=255, a=1.0)


def test_color_at_floors_fractional_coordinates(rgb_2x2: PixelBuffer) -> None:
    assert color_at(rgb_2x2, 1.99, 1.2) == Color(0, 0, 255, 1.0)
    assert color_at(rgb_2x2, 0.5, 0.999) == Color(255, 0, 0, 1.0)


def test_color_at_corners_succeed_and_outside_is_absent(rgb_2x2: PixelBuffer) -> None:
    assert color_at(rgb_2x2, 0, 0) is not None
    assert color_at(rgb_2x2, rgb_2x2.width - 1, rgb_2x2.height - 1) is not None

    assert color_at(rgb_2x2, rgb_2x2.width, 0) is None
    assert color_at(rgb_2x2, -1, 0) is None
    assert color_at(rgb_2x2, 0, rgb_2x2.height) is None
    assert color_at(rgb_2x2, -0.1, 0) is None


def test_x_past_row_end_does_not_wrap(rgb_2x2: PixelBuffer) -> None:
    # (2, 0) would be the flat index of (0, 1) if rows wrapped
    assert color_at(rgb_2x2, 2, 0) is None


def test_color_at_without_buffer_or_with_nan() -> None:
    assert color_at(None, 0, 0) is None
    buffer = make_buffer(1, 1, [(1, 2, 3, 4)])
    assert color_at(buffer, math.nan, 0) is None
    assert color_at(buffer, 0, math.inf) is None


def test_alpha_is_normalized() -> None:
    buffer = make_buffer(1, 1, [(10, 20, 30, 51)])

    color = buffer.color_at(0, 0)

    assert color is not None
    assert color.rgb == (10, 20, 30)
    assert color.a == pytest.approx(0.2)


def test_buffer_rejects_mismatched_data() -> None:
    with pytest.raises(ValueError):
        PixelBuffer(width=2, height=2, data=bytes(15))
    with pytest.raises(ValueError):
        PixelBuffer(width=-1, height=0, data=b"")


def test_from_image_converts_to_rgba() -> None:
    image = Image.new("RGB", (3, 2), color=(12, 34, 56))

    buffer = PixelBuffer.from_image(image)

    assert (buffer.width, buffer.height) == (3, 2)
    assert buffer.pixel_count == 6
    assert buffer.color_at(2, 1) == Color(12, 34, 56, 1.0)
    assert buffer.as_array().shape == (6, 4)
