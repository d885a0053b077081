"""Tests for image loading into a pixel buffer."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image, ImageGrab

from color_extractor.models.pixel_buffer import Color
from color_extractor.services.image_service import CLIPBOARD_SOURCE, ImageService


def _truncated_png(path: Path) -> Path:
    noise = np.random.default_rng(0).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    Image.fromarray(noise).save(path)
    # заголовок и IHDR целы, данные IDAT обрываются
    path.write_bytes(path.read_bytes()[:60])
    return path


def test_load_image_builds_buffer(tmp_path: Path) -> None:
    path = tmp_path / "red.png"
    Image.new("RGB", (4, 3), color=(200, 10, 20)).save(path)

    loaded = ImageService().load_image(path)

    assert loaded.source == str(path)
    assert (loaded.width, loaded.height) == (4, 3)
    assert loaded.pil_image.mode == "RGBA"
    assert loaded.buffer.color_at(3, 2) == Color(200, 10, 20, 1.0)


def test_load_image_keeps_transparency(tmp_path: Path) -> None:
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (1, 1), color=(1, 2, 3, 0)).save(path)

    loaded = ImageService().load_image(path)

    assert loaded.buffer.color_at(0, 0) == Color(1, 2, 3, 0.0)


def test_load_image_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ImageService().load_image(tmp_path / "nope.png")


def test_load_image_not_an_image(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("не картинка", encoding="utf-8")

    with pytest.raises(ValueError):
        ImageService().load_image(path)


def test_load_image_truncated_file(tmp_path: Path) -> None:
    path = _truncated_png(tmp_path / "cut.png")

    with pytest.raises(ValueError) as excinfo:
        ImageService().load_image(path)

    assert isinstance(excinfo.value.__cause__, OSError)


def test_grab_clipboard_with_image(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: Image.new("RGB", (2, 2), color=(5, 6, 7)))

    loaded = ImageService().grab_clipboard()

    assert loaded is not None
    assert loaded.source == CLIPBOARD_SOURCE
    assert loaded.buffer.color_at(1, 1) == Color(5, 6, 7, 1.0)


def test_grab_clipboard_with_file_list(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    text = tmp_path / "a.txt"
    text.write_text("x", encoding="utf-8")
    image_path = tmp_path / "b.png"
    Image.new("RGB", (1, 1), color=(9, 8, 7)).save(image_path)
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: [str(text), str(image_path)])

    loaded = ImageService().grab_clipboard()

    assert loaded is not None
    assert loaded.source == str(image_path)


def test_grab_clipboard_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: None)

    assert ImageService().grab_clipboard() is None


def test_grab_clipboard_skips_truncated_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    broken = _truncated_png(tmp_path / "a.png")
    image_path = tmp_path / "b.png"
    Image.new("RGB", (1, 1), color=(9, 8, 7)).save(image_path)
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: [str(broken), str(image_path)])

    loaded = ImageService().grab_clipboard()

    assert loaded is not None
    assert loaded.source == str(image_path)
