"""Построение небольших буферов пикселей для тестов."""

from __future__ import annotations

from typing import Iterable, Tuple

from color_extractor.models.pixel_buffer import PixelBuffer

Rgba = Tuple[int, int, int, int]


def make_buffer(width: int, height: int, pixels: Iterable[Rgba]) -> PixelBuffer:
    data = bytes(channel for pixel in pixels for channel in pixel)
    return PixelBuffer(width=width, height=height, data=data)


def solid_buffer(width: int, height: int, rgba: Rgba) -> PixelBuffer:
    return make_buffer(width, height, [rgba] * (width * height))


def half_and_half(width: int, height: int, top: Rgba, bottom: Rgba) -> PixelBuffer:
    """Верхняя половина строк одного цвета, нижняя другого."""
    split = height // 2
    pixels = [top if row < split else bottom for row in range(height) for _ in range(width)]
    return make_buffer(width, height, pixels)
