"""Модель загруженного изображения.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from color_extractor.models.pixel_buffer import PixelBuffer


@dataclass(frozen=True)
class LoadedImage:
    """Декодированное изображение для отображения и его буфер пикселей.

    Fields:
        source: Откуда загружено: путь к файлу или "clipboard".
        pil_image: Изображение PIL в режиме RGBA (для отрисовки).
        buffer: RGBA-сэмплы того же изображения (для выборки и кластеризации).
    """
    source: str
    pil_image: Image.Image
    buffer: PixelBuffer

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height
