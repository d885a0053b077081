"""Общие фикстуры: небольшие буферы пикселей и сессия с детерминированным ГСЧ."""

from __future__ import annotations

import numpy as np
import pytest

from color_extractor.config.settings import Settings
from color_extractor.controllers.workspace import Workspace
from color_extractor.models.pixel_buffer import PixelBuffer
from color_extractor.services.clustering_service import ClusteringService
from tests.helpers import make_buffer


@pytest.fixture
def rgb_2x2() -> PixelBuffer:
    return make_buffer(
        2,
        2,
        [(255, 0, 0, 255), (255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255)],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def workspace(settings: Settings) -> Workspace:
    return Workspace(settings=settings, clustering=ClusteringService(rng=np.random.default_rng(7)))
