"""Настройка логирования приложения."""

from __future__ import annotations

import logging

from color_extractor.config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Настраивает корневой логгер: уровень из настроек, формат с именем модуля."""

    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
