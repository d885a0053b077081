"""Поиск доминантных цветов: случайная выборка пикселей + k-средних в RGB.

Принципы:
- SRP: только алгоритм; результат отдаётся списком `Cluster`, запись в коллекцию делает координатор.
- DIP: источник случайности внедряется (`numpy.random.Generator`), в тестах с фиксированным seed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from color_extractor.models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

DEFAULT_K = 5
DEFAULT_SAMPLE_SIZE = 10_000
DEFAULT_ITERATIONS = 5


@dataclass(frozen=True)
class Cluster:
    """Итог одного кластера: центроид и число пикселей в последнем назначении."""
    centroid: Tuple[int, int, int]
    size: int


class ClusteringService:
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    # ---------- Вспомогательные функции ----------
    def sample_pixels(self, buffer: PixelBuffer, sample_size: int = DEFAULT_SAMPLE_SIZE) -> np.ndarray:
        """
        Случайная выборка с возвращением по всем пикселям буфера.
        Возвращает массив (sample_size, 3) int64; альфа отбрасывается.
        """
        pixels = buffer.as_array()
        indices = self._rng.integers(0, len(pixels), size=sample_size)
        return pixels[indices, :3].astype(np.int64)

    def init_centroids(self, samples: np.ndarray, k: int) -> np.ndarray:
        """
        K случайных пикселей выборки (с возвращением: два центроида могут совпасть).
        """
        picks = self._rng.integers(0, len(samples), size=k)
        return samples[picks].astype(np.float64)

    def assign(self, samples: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """
        Индекс ближайшего центроида для каждого пикселя.
        argmin берёт первый минимум: при равенстве побеждает меньший индекс.
        """
        # квадрат расстояния сохраняет порядок евклидова
        diff = samples[:, None, :] - centroids[None, :, :]  # (N, k, 3)
        dists = np.einsum("nkc,nkc->nk", diff, diff)
        return np.argmin(dists, axis=1)

    # ---------- k-средних ----------
    def kmeans(
        self,
        buffer: PixelBuffer,
        k: int = DEFAULT_K,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        iterations: int = DEFAULT_ITERATIONS,
    ) -> List[Cluster]:
        """
        Приближённый k-средних:
        1) Выборка sample_size пикселей
        2) Начальные центроиды: k случайных пикселей выборки
        3) Фиксированное число итераций (без проверки сходимости):
           назначение ближайшему центроиду, затем центроид = среднее назначенных,
           округлённое до целого; пустой кластер сохраняет прежний центроид
        4) Сортировка кластеров по размеру (по убыванию, устойчивая)
        """
        if k < 1:
            raise ValueError(f"k должно быть >= 1, получено {k}")
        if sample_size < 1:
            raise ValueError(f"sample_size должно быть >= 1, получено {sample_size}")
        if iterations < 1:
            raise ValueError(f"iterations должно быть >= 1, получено {iterations}")
        if buffer.pixel_count == 0:
            return []

        samples = self.sample_pixels(buffer, sample_size)
        centroids = self.init_centroids(samples, k)
        counts = np.zeros(k, dtype=np.int64)

        for iteration in range(iterations):
            labels = self.assign(samples, centroids)
            counts = np.bincount(labels, minlength=k)
            for ci in range(k):
                pts = samples[labels == ci]
                if pts.size == 0:
                    continue
                # округление .5 вверх, как и для HSL
                centroids[ci] = np.floor(pts.mean(axis=0) + 0.5)
            logger.debug("k-means pass %d: cluster sizes %s", iteration + 1, counts.tolist())

        order = sorted(range(k), key=lambda ci: -int(counts[ci]))
        return [
            Cluster(
                centroid=(int(centroids[ci, 0]), int(centroids[ci, 1]), int(centroids[ci, 2])),
                size=int(counts[ci]),
            )
            for ci in order
        ]

    def dominant_colors(
        self,
        buffer: PixelBuffer,
        k: int = DEFAULT_K,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        iterations: int = DEFAULT_ITERATIONS,
    ) -> List[Cluster]:
        """Непустые кластеры в порядке убывания размера."""
        clusters = self.kmeans(buffer, k=k, sample_size=sample_size, iterations=iterations)
        dominant = [cluster for cluster in clusters if cluster.size > 0]
        logger.info(
            "Found %d dominant colors (k=%d, samples=%d, iterations=%d)",
            len(dominant), k, sample_size, iterations,
        )
        return dominant
