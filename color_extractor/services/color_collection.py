"""Упорядоченный список извлечённых цветов без повторов.

Принципы:
- SRP: чистый контейнер состояния плюс вычисление представлений; не знает об изображении и UI.
- Уникальность по HEX: повторное добавление не ошибка, а отказ (`AddStatus.DUPLICATE`).
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from color_extractor.models.color_entry import AddOutcome, AddStatus, ColorEntry
from color_extractor.models.pixel_buffer import Color
from color_extractor.services.color_conversion import format_hsl, format_rgb, rgb_to_hex, rgb_to_hsl

logger = logging.getLogger(__name__)


class ColorCollection:
    def __init__(self) -> None:
        self._entries: List[ColorEntry] = []

    def add(self, r: int, g: int, b: int, a: float = 1.0) -> AddOutcome:
        """Добавляет цвет, если такого HEX ещё нет.

        Returns:
            `AddOutcome` с ADDED и новым элементом либо DUPLICATE и существующим.
        """
        hex_value = rgb_to_hex(r, g, b)
        existing = self._find(hex_value)
        if existing is not None:
            logger.debug("Color %s rejected: already in collection", hex_value)
            return AddOutcome(status=AddStatus.DUPLICATE, entry=existing)

        hsl = rgb_to_hsl(r, g, b)
        entry = ColorEntry(
            color=Color(r=r, g=g, b=b, a=a),
            hex=hex_value,
            rgb_string=format_rgb(r, g, b),
            hsl=hsl,
            hsl_string=format_hsl(hsl),
        )
        self._entries.append(entry)
        logger.debug("Color %s added (%d total)", hex_value, len(self._entries))
        return AddOutcome(status=AddStatus.ADDED, entry=entry)

    def clear(self) -> None:
        self._entries.clear()

    def list(self) -> Tuple[ColorEntry, ...]:
        """Снимок текущих элементов в порядке добавления (только чтение)."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ColorEntry]:
        return iter(self.list())

    def __contains__(self, hex_value: object) -> bool:
        return isinstance(hex_value, str) and self._find(hex_value) is not None

    def _find(self, hex_value: str) -> Optional[ColorEntry]:
        needle = hex_value.lower()
        for entry in self._entries:
            if entry.hex.lower() == needle:
                return entry
        return None
