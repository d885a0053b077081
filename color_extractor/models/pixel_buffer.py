"""Буфер пикселей декодированного изображения и доступ к отдельным цветам.

Принципы:
- SRP: только хранение RGBA-сэмплов и проверка границ при чтении.
- Чистый код: неизменяемость (`frozen=True`), буфер заменяется целиком при загрузке нового изображения.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class Color:
    """Цвет пикселя.

    Fields:
        r, g, b: Каналы 0–255.
        a: Нормализованная альфа 0.0–1.0 (1.0, если цвет получен не из точечной выборки).
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b


@dataclass(frozen=True)
class PixelBuffer:
    """Неизменяемое представление RGBA-сэмплов изображения.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        data: Плоская последовательность байт длиной width*height*4 (R, G, B, A; построчно, начало слева сверху).
    """
    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Недопустимый размер буфера: {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(f"Ожидалось {expected} байт RGBA, получено {len(self.data)}")

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Строит буфер из изображения PIL (приводится к RGBA)."""
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        width, height = rgba.size
        return cls(width=width, height=height, data=rgba.tobytes())

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def as_array(self) -> np.ndarray:
        """Возвращает представление (width*height, 4) uint8 без копирования данных."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(-1, 4)

    def color_at(self, x: float, y: float) -> Optional[Color]:
        """Цвет пикселя в координатах буфера или None за пределами изображения.

        Координаты с плавающей точкой округляются вниз до индекса пикселя.
        Каждая ось проверяется отдельно: x за концом строки не переносится на следующую.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        px = math.floor(x)
        py = math.floor(y)
        if not (0 <= px < self.width and 0 <= py < self.height):
            return None
        index = (py * self.width + px) * 4
        r, g, b, a = self.data[index:index + 4]
        return Color(r=r, g=g, b=b, a=a / 255)


def color_at(buffer: Optional[PixelBuffer], x: float, y: float) -> Optional[Color]:
    """То же, что `PixelBuffer.color_at`, но допускает отсутствие буфера."""
    if buffer is None:
        return None
    return buffer.color_at(x, y)
