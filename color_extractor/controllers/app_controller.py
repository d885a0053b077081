"""Контроллер приложения: связывает виджеты с рабочей сессией.

SOLID:
- SRP: класс переводит события UI в вызовы `Workspace` и обновляет виджеты по результату.
- DIP: логика выборки и кластеризации живёт в `Workspace` и сервисах, UI о них не знает.
Clean Code:
- Обработчики компактны; ошибки загрузки ловятся здесь, на границе с UI, и показываются в строке состояния.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import TclError, filedialog

import customtkinter as ctk

from color_extractor.controllers.workspace import Workspace
from color_extractor.models.image_model import LoadedImage
from color_extractor.services.image_service import ImageService
from color_extractor.ui.bottom_bar import BottomBar
from color_extractor.ui.colors_panel import ColorsPanel
from color_extractor.ui.image_viewer import ImageViewer
from color_extractor.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображений через `ImageService` (файл, буфер обмена).
    - Пипетка: превью под курсором и добавление цвета по щелчку.
    - Поиск доминантных цветов, сброс, копирование HEX.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    colors_panel: ColorsPanel
    bottom: BottomBar
    window: ctk.CTk
    workspace: Workspace

    _image_service: ImageService = field(default_factory=ImageService)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_paste = self._handle_paste
        self.sidebar.on_toggle_eyedropper = self._handle_toggle_eyedropper
        self.sidebar.on_auto_detect = self._handle_auto_detect
        self.sidebar.on_reset = self._handle_reset

        self.viewer.on_hover = self._handle_hover
        self.viewer.on_click = self._handle_click
        self.viewer.on_leave = self._handle_leave

        self.colors_panel.on_copy = self._handle_copy

        self.window.bind("<Control-v>", lambda _e: self._handle_paste())

    # ---- Image sources ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(
                    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            loaded = self._image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            logger.warning("Failed to load image: %s", exc)
            self.bottom.show_message("Не удалось загрузить изображение")
            return
        self._set_image(loaded)

    def _handle_paste(self) -> None:
        try:
            loaded = self._image_service.grab_clipboard()
        except (OSError, NotImplementedError) as exc:
            logger.warning("Clipboard is not available: %s", exc)
            self.bottom.show_message("Буфер обмена недоступен")
            return
        if loaded is None:
            self.bottom.show_message("В буфере обмена нет изображения")
            return
        self._set_image(loaded)
        self.bottom.show_message("Изображение вставлено")

    # ---- Eyedropper ----
    def _handle_toggle_eyedropper(self) -> None:
        active = self.workspace.toggle_eyedropper()
        self.sidebar.set_eyedropper_active(active)
        self.viewer.set_crosshair(active)
        if active:
            self.bottom.show_message("Пипетка включена: щёлкните по изображению, чтобы выбрать цвет")
        else:
            self.sidebar.update_cursor_preview(None)

    def _handle_hover(self, x: float, y: float, display_w: int, display_h: int) -> None:
        if not self.workspace.eyedropper_active:
            return
        self.sidebar.update_cursor_preview(self.workspace.hover(x, y, display_w, display_h))

    def _handle_click(self, x: float, y: float, display_w: int, display_h: int) -> None:
        if not self.workspace.eyedropper_active:
            return
        outcome = self.workspace.commit(x, y, display_w, display_h)
        if outcome is None:
            return
        if outcome.added:
            self._refresh_colors()
            self.bottom.show_message("Цвет добавлен")
        else:
            self.bottom.show_message("Цвет уже есть в списке")

    def _handle_leave(self) -> None:
        self.sidebar.update_cursor_preview(None)

    # ---- Dominant colors / reset / copy ----
    def _handle_auto_detect(self) -> None:
        if not self.workspace.has_image:
            return
        self.workspace.auto_detect()
        self._refresh_colors()
        self.bottom.show_message("Доминантные цвета найдены")

    def _handle_reset(self) -> None:
        self.workspace.reset()
        self.viewer.set_image(None)
        self.viewer.set_crosshair(False)
        self.sidebar.set_image_info(None)
        self.sidebar.set_eyedropper_active(False)
        self.sidebar.update_cursor_preview(None)
        self._refresh_colors()
        self.bottom.show_message("Сброшено")

    def _handle_copy(self, hex_value: str) -> None:
        try:
            self.window.clipboard_clear()
            self.window.clipboard_append(hex_value)
        except TclError as exc:
            logger.warning("Clipboard write failed: %s", exc)
            self.bottom.show_message("Не удалось скопировать")
            return
        self.bottom.show_message(f"Скопировано: {hex_value}")

    # ---- Helpers ----
    def _set_image(self, loaded: LoadedImage) -> None:
        self.workspace.load(loaded.buffer)
        self.viewer.set_image(loaded.pil_image)
        self.sidebar.set_image_info(loaded)
        self.sidebar.update_cursor_preview(None)
        self._refresh_colors()

    def _refresh_colors(self) -> None:
        self.colors_panel.set_colors(self.workspace.colors)
