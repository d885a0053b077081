import customtkinter as ctk

from color_extractor.config.settings import Settings
from color_extractor.controllers.app_controller import AppController
from color_extractor.controllers.workspace import Workspace
from color_extractor.ui.bottom_bar import BottomBar
from color_extractor.ui.colors_panel import ColorsPanel
from color_extractor.ui.image_viewer import ImageViewer
from color_extractor.ui.sidebar import Sidebar


class ColorExtractorApp(ctk.CTk):
    def __init__(self, settings: Settings) -> None:
        super().__init__()
        ctk.set_appearance_mode(settings.appearance_mode)
        ctk.set_default_color_theme("blue")

        self.title("Color Extractor")
        self.minsize(960, 680)

        # root layout: viewer + sidebar on top, colors below, status at the bottom
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)
        self.grid_rowconfigure(2, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._colors = ColorsPanel(self, columns=settings.cluster_count)
        self._colors.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 6))

        self._bottom = BottomBar(self, duration_ms=settings.toast_duration_ms)
        self._bottom.grid(row=2, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer,
            sidebar=self._sidebar,
            colors_panel=self._colors,
            bottom=self._bottom,
            window=self,
            workspace=Workspace(settings=settings),
        )
        self._controller.bind_events()
