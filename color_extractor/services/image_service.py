"""Загрузка изображений (диск, буфер обмена) и построение буфера пикселей.

Принципы:
- SRP: класс отвечает только за декодирование и упаковку в `LoadedImage`.
- OCP: новые источники добавляются отдельными методами.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageGrab, UnidentifiedImageError

from color_extractor.models.image_model import LoadedImage
from color_extractor.models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

CLIPBOARD_SOURCE = "clipboard"


class ImageService:
    def load_image(self, file_path: str | Path) -> LoadedImage:
        """Загружает изображение с диска.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `LoadedImage` c `PIL.Image.Image` в режиме RGBA и его `PixelBuffer`.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение или повреждён.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                pil_image = opened.convert("RGBA")
        except (UnidentifiedImageError, OSError) as exc:
            # битый или обрезанный файл Pillow сообщает через OSError уже при декодировании
            raise ValueError(f"Файл не является изображением: {path}") from exc

        logger.info("Loaded %s (%dx%d)", path, pil_image.width, pil_image.height)
        return self.from_pil(pil_image, source=str(path))

    def grab_clipboard(self) -> Optional[LoadedImage]:
        """Берёт изображение из системного буфера обмена.

        Pillow отдаёт либо картинку, либо список путей к файлам (скопированные файлы),
        либо None. Из списка берётся первый файл, который открывается как изображение.

        Returns:
            `LoadedImage` или None, если изображения в буфере нет.

        Raises:
            OSError, NotImplementedError: если платформа не даёт доступа к буферу обмена.
        """
        content = ImageGrab.grabclipboard()
        if isinstance(content, Image.Image):
            logger.info("Pasted image from clipboard (%dx%d)", content.width, content.height)
            return self.from_pil(content.convert("RGBA"), source=CLIPBOARD_SOURCE)
        if isinstance(content, list):
            for candidate in content:
                try:
                    return self.load_image(candidate)
                except (FileNotFoundError, ValueError):
                    logger.debug("Clipboard entry %s is not an image", candidate)
        return None

    def from_pil(self, image: Image.Image, source: str) -> LoadedImage:
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return LoadedImage(source=source, pil_image=rgba, buffer=PixelBuffer.from_image(rgba))
