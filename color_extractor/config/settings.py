"""Настройки приложения из переменных окружения (префикс COLOR_EXTRACTOR_)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

ENV_PREFIX = "COLOR_EXTRACTOR_"


def _load_env_file(path: str = ".env") -> None:
    """Дополняет os.environ значениями из .env, если файл есть; заданные переменные не перезаписываются."""
    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} должно быть целым числом, получено {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class Settings:
    """Параметры кластеризации, интерфейса и логирования."""

    cluster_count: int = 5
    sample_size: int = 10_000
    iterations: int = 5
    toast_duration_ms: int = 2000
    log_level: str = "INFO"
    appearance_mode: str = "system"

    def __post_init__(self) -> None:
        for name in ("cluster_count", "sample_size", "iterations"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} должно быть >= 1, получено {getattr(self, name)}")
        if self.toast_duration_ms < 0:
            raise ValueError(f"toast_duration_ms не может быть отрицательным: {self.toast_duration_ms}")


def build_settings() -> Settings:
    _load_env_file()

    return Settings(
        cluster_count=_env_int("CLUSTER_COUNT", 5),
        sample_size=_env_int("SAMPLE_SIZE", 10_000),
        iterations=_env_int("ITERATIONS", 5),
        toast_duration_ms=_env_int("TOAST_DURATION_MS", 2000),
        log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", "INFO"),
        appearance_mode=os.getenv(ENV_PREFIX + "APPEARANCE_MODE", "system"),
    )


@lru_cache
def get_settings() -> Settings:
    """Кэшированный экземпляр настроек: окружение и .env читаются один раз."""

    return build_settings()
