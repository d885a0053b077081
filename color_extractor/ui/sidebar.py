"""Боковая панель: источники изображения, инструменты, информация и превью под курсором.

Принципы:
- SRP: управляет только UI, не содержит логики извлечения цветов.
- ISP: события наружу через `on_*`, обновление состояния через `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from color_extractor.models.image_model import LoadedImage

_ACTIVE_FG = "#7c3aed"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: изображение, инструменты, информация, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=260, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_paste: Optional[Callable[[], None]] = None
        self.on_toggle_eyedropper: Optional[Callable[[], None]] = None
        self.on_auto_detect: Optional[Callable[[], None]] = None
        self.on_reset: Optional[Callable[[], None]] = None

        # Image source
        self._title = ctk.CTkLabel(self, text="Изображение", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть файл…", command=lambda: self._emit(self.on_open_file))
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._paste_btn = ctk.CTkButton(
            self, text="Вставить из буфера (Ctrl+V)", command=lambda: self._emit(self.on_paste)
        )
        self._paste_btn.grid(row=2, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Tools
        self._tools_title = ctk.CTkLabel(self, text="Инструменты", font=ctk.CTkFont(size=16, weight="bold"))
        self._tools_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        self._eyedropper_btn = ctk.CTkButton(
            self, text="Пипетка", command=lambda: self._emit(self.on_toggle_eyedropper)
        )
        self._eyedropper_btn.grid(row=4, column=0, padx=8, pady=(0, 6), sticky="ew")
        self._default_fg = self._eyedropper_btn.cget("fg_color")

        self._auto_btn = ctk.CTkButton(
            self, text="Доминантные цвета", command=lambda: self._emit(self.on_auto_detect)
        )
        self._auto_btn.grid(row=5, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._reset_btn = ctk.CTkButton(
            self, text="Сбросить", fg_color="transparent", border_width=1, command=lambda: self._emit(self.on_reset)
        )
        self._reset_btn.grid(row=6, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        self._source_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._info_source = ctk.CTkLabel(self, textvariable=self._source_val, wraplength=240, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_source.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=9, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Под курсором", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=10, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_row = ctk.CTkFrame(self, fg_color="transparent")
        self._cursor_row.grid(row=11, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_swatch = ctk.CTkFrame(self._cursor_row, width=28, height=28, corner_radius=6, border_width=1)
        self._cursor_swatch.grid(row=0, column=0, padx=(0, 8))
        self._cursor_hex_val = ctk.StringVar(value="—")
        self._cursor_hex = ctk.CTkLabel(self._cursor_row, textvariable=self._cursor_hex_val, font=ctk.CTkFont(family="Courier"))
        self._cursor_hex.grid(row=0, column=1, sticky="w")
        self._swatch_default = self._cursor_swatch.cget("fg_color")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image: Optional[LoadedImage]) -> None:
        if image is None:
            self._source_val.set("—")
            self._dims_val.set("—")
            return
        self._source_val.set(f"Источник: {image.source}")
        self._dims_val.set(f"Размер: {image.width} × {image.height}")

    def set_eyedropper_active(self, active: bool) -> None:
        """Подсвечивает кнопку пипетки, пока инструмент включён."""
        self._eyedropper_btn.configure(fg_color=_ACTIVE_FG if active else self._default_fg)

    def update_cursor_preview(self, hex_value: Optional[str]) -> None:
        if hex_value is None:
            self._cursor_hex_val.set("—")
            self._cursor_swatch.configure(fg_color=self._swatch_default)
            return
        self._cursor_hex_val.set(hex_value)
        self._cursor_swatch.configure(fg_color=hex_value)

    # ---- Helpers ----
    @staticmethod
    def _emit(callback: Optional[Callable[[], None]]) -> None:
        if callback:
            callback()
