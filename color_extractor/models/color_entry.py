"""Элементы списка извлечённых цветов и результат попытки добавления.

Все представления цвета вычисляются один раз при вставке и дальше не меняются.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from color_extractor.models.pixel_buffer import Color


@dataclass(frozen=True)
class Hsl:
    """HSL в целых: h 0–360 (градусы), s и l 0–100 (проценты)."""
    h: int
    s: int
    l: int


@dataclass(frozen=True)
class ColorEntry:
    """Элемент коллекции с кешированными строковыми представлениями.

    Fields:
        color: Исходный цвет.
        hex: "#rrggbb" в нижнем регистре.
        rgb_string: "rgb(r, g, b)".
        hsl: Тройка HSL.
        hsl_string: "hsl(h, s%, l%)".
    """
    color: Color
    hex: str
    rgb_string: str
    hsl: Hsl
    hsl_string: str


class AddStatus(Enum):
    ADDED = "added"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class AddOutcome:
    """Результат `ColorCollection.add`.

    Для DUPLICATE `entry` указывает на уже существующий элемент с тем же HEX.
    """
    status: AddStatus
    entry: Optional[ColorEntry] = None

    @property
    def added(self) -> bool:
        return self.status is AddStatus.ADDED
