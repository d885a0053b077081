"""Виджет просмотра изображения: вписывание в окно, масштабирование, панорамирование.

Принципы:
- SRP: отвечает только за представление и интеракции с изображением.
- Чистый код: виджет не читает пиксели сам; наружу отдаются координаты указателя
  относительно отображаемого изображения и его текущий размер на экране.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

# (x, y, display_width, display_height)
PointerCallback = Callable[[float, float, int, int], None]


class ImageViewer(ctk.CTkFrame):
    """Канва с изображением: ЛКМ выбирает цвет, ПКМ двигает, колесо масштабирует."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None

        self._scale_factor: float = 1.0
        self._fit_scale_factor: float = 1.0
        self._user_zoomed: bool = False
        self._image_top_left: Optional[Tuple[int, int]] = None

        # panning state
        self._is_panning: bool = False
        self._pan_start_canvas_xy: Optional[Tuple[int, int]] = None
        self._pan_start_top_left: Optional[Tuple[int, int]] = None

        self.on_hover: Optional[PointerCallback] = None
        self.on_click: Optional[PointerCallback] = None
        self.on_leave: Optional[Callable[[], None]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<Motion>", self._on_mouse_move)
        self._canvas.bind("<Leave>", self._on_mouse_leave)
        self._canvas.bind("<ButtonRelease-1>", self._on_left_click)

        # Mouse wheel zoom (cross-platform)
        self._canvas.bind("<MouseWheel>", self._on_mouse_wheel)      # Windows/macOS
        self._canvas.bind("<Button-4>", self._on_mouse_wheel_linux)  # Linux scroll up
        self._canvas.bind("<Button-5>", self._on_mouse_wheel_linux)  # Linux scroll down

        # Panning with right mouse drag; left button is reserved for picking
        self._canvas.bind("<ButtonPress-3>", self._on_pan_start)
        self._canvas.bind("<B3-Motion>", self._on_pan_move)
        self._canvas.bind("<ButtonRelease-3>", self._on_pan_end)

    # ---- Public API ----
    def set_image(self, image: Optional[Image.Image]) -> None:
        """Устанавливает изображение и вписывает его в канву; None очищает канву."""
        self._image = image
        self._user_zoomed = False
        self._compute_fit_scale()
        self._scale_factor = self._fit_scale_factor
        self._image_top_left = None  # reset to center
        self._render_image()

    def set_crosshair(self, active: bool) -> None:
        self._canvas.configure(cursor="crosshair" if active else "")

    # ---- Internals ----
    def _displayed_size(self) -> Tuple[int, int]:
        if self._image is None:
            return 0, 0
        img_w, img_h = self._image.size
        return max(1, int(img_w * self._scale_factor)), max(1, int(img_h * self._scale_factor))

    def _on_canvas_resize(self, _event: tk.Event) -> None:
        if self._image is None:
            return
        self._compute_fit_scale()
        if not self._user_zoomed:
            self._scale_factor = self._fit_scale_factor
            self._image_top_left = None
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        if self._image is None:
            self._tk_image = None
            return

        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())
        scaled_w, scaled_h = self._displayed_size()

        # compute allowed top-left range
        if scaled_w <= canvas_w:
            min_x = max_x = (canvas_w - scaled_w) // 2
        else:
            min_x = canvas_w - scaled_w
            max_x = 0
        if scaled_h <= canvas_h:
            min_y = max_y = (canvas_h - scaled_h) // 2
        else:
            min_y = canvas_h - scaled_h
            max_y = 0

        if self._image_top_left is None:
            x = (canvas_w - scaled_w) // 2 if scaled_w <= canvas_w else 0
            y = (canvas_h - scaled_h) // 2 if scaled_h <= canvas_h else 0
            self._image_top_left = (x, y)
        else:
            ox, oy = self._image_top_left
            self._image_top_left = (max(min_x, min(max_x, ox)), max(min_y, min(max_y, oy)))

        ox, oy = self._image_top_left
        # NEAREST keeps pixel edges crisp when zoomed in past 100%
        resample = Image.Resampling.NEAREST if self._scale_factor > 1.0 else Image.Resampling.LANCZOS
        resized = self._image.resize((scaled_w, scaled_h), resample)
        self._tk_image = ImageTk.PhotoImage(resized)
        self._canvas.create_image(ox, oy, image=self._tk_image, anchor="nw")

    def _compute_fit_scale(self) -> None:
        if self._image is None:
            self._fit_scale_factor = 1.0
            return
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        img_w, img_h = self._image.size
        if img_w == 0 or img_h == 0:
            self._fit_scale_factor = 1.0
            return
        # never upscale on fit; small images stay at 100%
        self._fit_scale_factor = max(0.05, min(1.0, canvas_w / img_w, canvas_h / img_h))

    def _relative_pointer(self, cx: int, cy: int) -> Optional[Tuple[float, float, int, int]]:
        if self._image is None or self._image_top_left is None:
            return None
        ox, oy = self._image_top_left
        scaled_w, scaled_h = self._displayed_size()
        return float(cx - ox), float(cy - oy), scaled_w, scaled_h

    def _on_mouse_move(self, event: tk.Event) -> None:
        if self._is_panning or self.on_hover is None:
            return
        pointer = self._relative_pointer(event.x, event.y)
        if pointer is None:
            return
        self.on_hover(*pointer)

    def _on_left_click(self, event: tk.Event) -> None:
        if self.on_click is None:
            return
        pointer = self._relative_pointer(event.x, event.y)
        if pointer is None:
            return
        self.on_click(*pointer)

    def _on_mouse_leave(self, _event: tk.Event) -> None:
        if self.on_leave:
            self.on_leave()

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    # ---- Mouse wheel zoom ----
    def _on_mouse_wheel(self, event: tk.Event) -> None:
        if self._image is None:
            return
        delta = event.delta
        if delta == 0:
            return
        factor = 1.1 if delta > 0 else 1.0 / 1.1
        self._zoom_at_point(event.x, event.y, factor)

    def _on_mouse_wheel_linux(self, event: tk.Event) -> None:
        # On X11, Button-4 is up, Button-5 is down
        if self._image is None:
            return
        factor = 1.1 if getattr(event, "num", None) == 4 else 1.0 / 1.1
        self._zoom_at_point(event.x, event.y, factor)

    def _zoom_at_point(self, cx: int, cy: int, factor: float) -> None:
        if self._image_top_left is None or self._image is None:
            return
        old_scale = self._scale_factor
        new_scale = max(0.05, min(8.0, old_scale * factor))
        if abs(new_scale - old_scale) < 1e-6:
            return

        ox, oy = self._image_top_left
        ix = (cx - ox) / old_scale
        iy = (cy - oy) / old_scale

        self._scale_factor = new_scale
        self._user_zoomed = True

        # keep (ix, iy) under the cursor
        self._image_top_left = (int(round(cx - ix * new_scale)), int(round(cy - iy * new_scale)))
        self._render_image()

    # ---- Panning ----
    def _on_pan_start(self, event: tk.Event) -> None:
        if self._image_top_left is None:
            return
        self._is_panning = True
        self._pan_start_canvas_xy = (event.x, event.y)
        self._pan_start_top_left = self._image_top_left

    def _on_pan_move(self, event: tk.Event) -> None:
        if not self._is_panning or self._pan_start_canvas_xy is None or self._pan_start_top_left is None:
            return
        sx, sy = self._pan_start_canvas_xy
        ox, oy = self._pan_start_top_left
        self._image_top_left = (ox + event.x - sx, oy + event.y - sy)
        self._render_image()

    def _on_pan_end(self, _event: tk.Event) -> None:
        self._is_panning = False
        self._pan_start_canvas_xy = None
        self._pan_start_top_left = None
