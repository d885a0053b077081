from __future__ import annotations

from typing import Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    """Строка состояния: временные уведомления (исчезают через `duration_ms`)."""
    def __init__(self, master: ctk.CTk, duration_ms: int = 2000, **kwargs) -> None:
        super().__init__(master, height=36, **kwargs)
        self._duration_ms = duration_ms
        self._hide_job: Optional[str] = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._message = ctk.StringVar(value="")
        self._label = ctk.CTkLabel(self, textvariable=self._message, anchor="w")
        self._label.grid(row=0, column=0, padx=10, pady=6, sticky="ew")

    # public API (called from controller)
    def show_message(self, text: str) -> None:
        """Показывает сообщение; новое сообщение перезапускает таймер скрытия."""
        self._message.set(text)
        if self._hide_job is not None:
            self.after_cancel(self._hide_job)
            self._hide_job = None
        if self._duration_ms > 0:
            self._hide_job = self.after(self._duration_ms, self._clear)

    # helpers
    def _clear(self) -> None:
        self._hide_job = None
        self._message.set("")
