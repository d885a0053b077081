"""Преобразования цвета: RGB <-> HEX, RGB -> HSL и строковые представления.

Все функции чистые и детерминированные. Входные каналы считаются уже
целыми 0–255; повторного ограничения диапазона нет.
"""
from __future__ import annotations

import math
from typing import Tuple

from color_extractor.models.color_entry import Hsl


def round_half_up(value: float) -> int:
    """Округление к ближайшему целому, .5 вверх (встроенный `round` округляет к чётному)."""
    return int(math.floor(value + 0.5))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    """Разбирает "#rrggbb" (регистр и "#" не важны).

    Raises:
        ValueError: если строка не является 6-значным HEX.
    """
    value = hex_str.strip().lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Ожидался HEX из 6 цифр: {hex_str!r}")
    try:
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError as exc:
        raise ValueError(f"Некорректный HEX: {hex_str!r}") from exc
    return r, g, b


def rgb_to_hsl(r: int, g: int, b: int) -> Hsl:
    """Стандартное преобразование RGB -> HSL.

    1) Каналы нормализуются в [0, 1], l = (max + min) / 2.
    2) Если max == min, цвет ахроматический: h = s = 0.
    3) Иначе s = d / (2 - max - min) при l > 0.5, либо d / (max + min); d = max - min.
    4) Оттенок по максимальному каналу (шесть секторов), затем в градусы.
    """
    rf, gf, bf = r / 255, g / 255, b / 255
    c_max = max(rf, gf, bf)
    c_min = min(rf, gf, bf)
    lightness = (c_max + c_min) / 2

    if c_max == c_min:
        hue = saturation = 0.0
    else:
        d = c_max - c_min
        saturation = d / (2 - c_max - c_min) if lightness > 0.5 else d / (c_max + c_min)
        if c_max == rf:
            hue = ((gf - bf) / d + (6 if gf < bf else 0)) / 6
        elif c_max == gf:
            hue = ((bf - rf) / d + 2) / 6
        else:
            hue = ((rf - gf) / d + 4) / 6

    return Hsl(
        h=round_half_up(hue * 360),
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
    )


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_hsl(hsl: Hsl) -> str:
    return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"
