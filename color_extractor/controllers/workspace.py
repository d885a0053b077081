"""Рабочая сессия: текущее изображение, список цветов и инструмент «пипетка».

Принципы:
- SRP: координирует выборку, кластеризацию и коллекцию; ничего не знает о виджетах.
- DIP: сервис кластеризации и настройки передаются снаружи, по умолчанию создаются свои.

Координаты указателя приходят относительно левого верхнего угла отображаемого
изображения вместе с его текущим размером на экране; перевод в координаты
буфера делается масштабированием на отношение размеров.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from color_extractor.config.settings import Settings, get_settings
from color_extractor.models.color_entry import AddOutcome, ColorEntry
from color_extractor.models.pixel_buffer import Color, PixelBuffer, color_at
from color_extractor.services.clustering_service import ClusteringService
from color_extractor.services.color_collection import ColorCollection
from color_extractor.services.color_conversion import rgb_to_hex

logger = logging.getLogger(__name__)


class Workspace:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        clustering: Optional[ClusteringService] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._clustering = clustering or ClusteringService()
        self._collection = ColorCollection()
        self._buffer: Optional[PixelBuffer] = None
        self._eyedropper_active: bool = False

    # ---- State ----
    @property
    def buffer(self) -> Optional[PixelBuffer]:
        return self._buffer

    @property
    def has_image(self) -> bool:
        return self._buffer is not None

    @property
    def colors(self) -> Tuple[ColorEntry, ...]:
        return self._collection.list()

    @property
    def eyedropper_active(self) -> bool:
        return self._eyedropper_active

    def load(self, buffer: PixelBuffer) -> None:
        """Заменяет буфер целиком и очищает список цветов."""
        self._buffer = buffer
        self._collection.clear()
        logger.info("Workspace loaded %dx%d buffer", buffer.width, buffer.height)

    def reset(self) -> None:
        """Сбрасывает изображение, цвета и пипетку."""
        self._buffer = None
        self._collection.clear()
        self._eyedropper_active = False
        logger.info("Workspace reset")

    def toggle_eyedropper(self) -> bool:
        self._eyedropper_active = not self._eyedropper_active
        return self._eyedropper_active

    # ---- Point sampling ----
    def to_buffer_coords(
        self, vx: float, vy: float, display_width: float, display_height: float
    ) -> Optional[Tuple[float, float]]:
        """Переводит координаты относительно отображаемого изображения в координаты буфера."""
        if self._buffer is None or display_width <= 0 or display_height <= 0:
            return None
        scale_x = self._buffer.width / display_width
        scale_y = self._buffer.height / display_height
        return vx * scale_x, vy * scale_y

    def sample(self, vx: float, vy: float, display_width: float, display_height: float) -> Optional[Color]:
        coords = self.to_buffer_coords(vx, vy, display_width, display_height)
        if coords is None:
            return None
        return color_at(self._buffer, *coords)

    def hover(self, vx: float, vy: float, display_width: float, display_height: float) -> Optional[str]:
        """HEX цвета под указателем для живого превью; состояние не меняется."""
        color = self.sample(vx, vy, display_width, display_height)
        if color is None:
            return None
        return rgb_to_hex(color.r, color.g, color.b)

    def commit(
        self, vx: float, vy: float, display_width: float, display_height: float
    ) -> Optional[AddOutcome]:
        """Добавляет цвет под указателем; None, если изображения нет или точка вне его."""
        color = self.sample(vx, vy, display_width, display_height)
        if color is None:
            return None
        return self._collection.add(color.r, color.g, color.b, color.a)

    def add_color(self, r: int, g: int, b: int) -> AddOutcome:
        return self._collection.add(r, g, b)

    # ---- Dominant colors ----
    def auto_detect(self, k: Optional[int] = None) -> Tuple[ColorEntry, ...]:
        """Заменяет список цветов доминантными цветами всего изображения.

        Без изображения ничего не делает и возвращает пустой кортеж.
        """
        if self._buffer is None:
            return ()
        clusters = self._clustering.dominant_colors(
            self._buffer,
            k=k if k is not None else self._settings.cluster_count,
            sample_size=self._settings.sample_size,
            iterations=self._settings.iterations,
        )
        self._collection.clear()
        for cluster in clusters:
            self._collection.add(*cluster.centroid)
        return self._collection.list()
