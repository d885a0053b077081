"""Tests for environment-driven settings."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from color_extractor.config.settings import Settings, build_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    env = {key: value for key, value in os.environ.items() if not key.startswith("COLOR_EXTRACTOR_")}
    monkeypatch.setattr(os, "environ", env)


def test_defaults() -> None:
    settings = build_settings()

    assert settings == Settings()
    assert (settings.cluster_count, settings.sample_size, settings.iterations) == (5, 10_000, 5)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLOR_EXTRACTOR_CLUSTER_COUNT", "8")
    monkeypatch.setenv("COLOR_EXTRACTOR_LOG_LEVEL", "DEBUG")

    settings = build_settings()

    assert settings.cluster_count == 8
    assert settings.log_level == "DEBUG"


def test_env_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("# comment\nCOLOR_EXTRACTOR_ITERATIONS=3\n", encoding="utf-8")

    settings = build_settings()

    assert settings.iterations == 3


def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLOR_EXTRACTOR_SAMPLE_SIZE", "много")
    with pytest.raises(ValueError):
        build_settings()

    with pytest.raises(ValueError):
        Settings(cluster_count=0)
    with pytest.raises(ValueError):
        Settings(toast_duration_ms=-1)
