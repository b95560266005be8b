# core/engine.py
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Sequence

import numpy as np

from kcluster.core.base import KMeansBase
from kcluster.core.cluster import Cluster, default_features
from kcluster.distance.metrics import DistanceFn, euclidean_distance, get_distance
from kcluster.errors import InvalidParameter


class KMeans(KMeansBase):
    """
    KMeans с внедряемой метрикой расстояния.

    Метрика вызывается как ``distance(centroid, features)`` для каждой пары
    объект/центроид, поэтому подходит любая функция двух векторов,
    а не только встроенные.
    """

    def __init__(
        self,
        n_clusters: int,
        max_iterations: int = 100,
        distance: DistanceFn | str = euclidean_distance,
        rng: np.random.Generator | int | None = None,
        logger: Any | None = None,
    ) -> None:
        if isinstance(distance, str):
            distance = get_distance(distance)
        if not callable(distance):
            raise InvalidParameter(f"distance must be callable, got {distance!r}")
        super().__init__(
            n_clusters=n_clusters,
            max_iterations=max_iterations,
            rng=rng,
            logger=logger,
        )
        self.distance = distance

    @property
    def run_name(self) -> str:
        return getattr(self.distance, "__name__", type(self.distance).__name__)

    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        labels = np.empty(X.shape[0], dtype=np.int64)

        for n, x in enumerate(X):
            # при равенстве расстояний побеждает кластер, созданный раньше
            best_k = 0
            best_distance = self.distance(centroids[0], x)
            for k in range(1, centroids.shape[0]):
                d = self.distance(centroids[k], x)
                if d < best_distance:
                    best_distance = d
                    best_k = k
            labels[n] = best_k

        return labels

    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> np.ndarray:
        # пустой кластер сохраняет прежний центроид
        new_centroids = centroids.copy()

        for k in range(centroids.shape[0]):
            points = X[labels == k]
            if len(points) > 0:
                new_centroids[k] = points.mean(axis=0)

        return new_centroids


def k_cluster(
    k: int,
    max_iterations: int,
    distance: DistanceFn | str,
    items: Iterable[Any],
    *,
    features: Callable[[Any], Sequence[float]] = default_features,
    rng: np.random.Generator | int | None = None,
    logger: Any | None = None,
) -> List[Cluster]:
    """
    Кластеризует объекты методом k-средних.

    Args:
        k: Количество кластеров (>= 1, может превышать число объектов)
        max_iterations: Максимальное число итераций (>= 0)
        distance: Функция ``(vector, vector) -> float`` или имя встроенной
            метрики ("manhattan", "euclidean", "pearson")
        items: Объекты с методом ``features()`` (или любые объекты, если
            передан адаптер ``features``)
        features: Адаптер, возвращающий вектор признаков объекта
        rng: Генератор numpy или seed для воспроизводимой инициализации
        logger: Логгер для сообщений о ходе итераций

    Returns:
        Список из k кластеров; пустой список для пустого набора объектов

    Raises:
        InvalidParameter: k < 1, max_iterations < 0 или неизвестная метрика
        DimensionMismatch: Векторы признаков разной или нулевой длины
        InvalidFeatures: Признаки содержат NaN/inf
    """
    model = KMeans(
        n_clusters=k,
        max_iterations=max_iterations,
        distance=distance,
        rng=rng,
        logger=logger,
    )
    return model.fit(items, features=features)
