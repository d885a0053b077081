"""Панель извлечённых цветов: карточки с образцом, HEX, RGB, HSL и кнопкой копирования."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import customtkinter as ctk

from color_extractor.models.color_entry import ColorEntry


class ColorsPanel(ctk.CTkScrollableFrame):
    def __init__(self, master: ctk.CTk, columns: int = 5, **kwargs) -> None:
        super().__init__(master, height=190, label_text="Цвета", **kwargs)
        self._columns = max(1, columns)
        for col in range(self._columns):
            self.grid_columnconfigure(col, weight=1, uniform="cards")

        self.on_copy: Optional[Callable[[str], None]] = None
        self._cards: List[ctk.CTkFrame] = []
        self.set_colors(())

    def set_colors(self, entries: Sequence[ColorEntry]) -> None:
        """Перерисовывает карточки в порядке добавления."""
        for card in self._cards:
            card.destroy()
        self._cards = []

        if not entries:
            placeholder = ctk.CTkFrame(self, fg_color="transparent")
            ctk.CTkLabel(placeholder, text="Цвета ещё не извлечены", text_color="gray").pack(pady=24)
            placeholder.grid(row=0, column=0, columnspan=self._columns, sticky="ew")
            self._cards.append(placeholder)
            return

        for index, entry in enumerate(entries):
            card = self._build_card(entry)
            card.grid(row=index // self._columns, column=index % self._columns, padx=6, pady=6, sticky="nsew")
            self._cards.append(card)

    def _build_card(self, entry: ColorEntry) -> ctk.CTkFrame:
        card = ctk.CTkFrame(self, corner_radius=10)
        card.grid_columnconfigure(0, weight=1)

        swatch = ctk.CTkFrame(card, height=56, corner_radius=8, fg_color=entry.hex)
        swatch.grid(row=0, column=0, padx=6, pady=(6, 4), sticky="ew")
        swatch.bind("<Button-1>", lambda _e, value=entry.hex: self._emit_copy(value))

        ctk.CTkLabel(card, text=entry.hex, font=ctk.CTkFont(family="Courier", size=14, weight="bold")).grid(
            row=1, column=0, padx=6, sticky="w"
        )
        ctk.CTkLabel(card, text=f"RGB: {entry.rgb_string}", font=ctk.CTkFont(size=11)).grid(
            row=2, column=0, padx=6, sticky="w"
        )
        ctk.CTkLabel(card, text=f"HSL: {entry.hsl_string}", font=ctk.CTkFont(size=11)).grid(
            row=3, column=0, padx=6, sticky="w"
        )
        ctk.CTkButton(
            card, text="Копировать HEX", height=26, command=lambda value=entry.hex: self._emit_copy(value)
        ).grid(row=4, column=0, padx=6, pady=(4, 6), sticky="ew")
        return card

    def _emit_copy(self, hex_value: str) -> None:
        if self.on_copy:
            self.on_copy(hex_value)
