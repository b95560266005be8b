from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Sequence

import numpy as np

from kcluster.core.cluster import Cluster, default_features
from kcluster.core.config import KMeansConfig
from kcluster.data.validation import extract_features, feature_ranges
from kcluster.metrics.timers import Timer
from kcluster.utils.logging import format_run_prefix


class KMeansBase(ABC):
    """
    Базовый класс для реализаций KMeans.

    Отвечает за инициализацию центроидов, цикл итераций, проверку
    сходимости и сбор таймингов:
    - T_назначения: время шага assign_clusters (вместе с заполнением members);
    - T_обновления: время шага update_centroids;
    - T_итерации: сумма двух предыдущих.

    Сходимость определяется по содержимому разбиения: если вектор меток
    на текущем шаге назначения совпадает с предыдущим, цикл завершается.
    """

    def __init__(
        self,
        n_clusters: int,
        max_iterations: int = 100,
        rng: np.random.Generator | int | None = None,
        logger: Any | None = None,
    ):
        seed = None if isinstance(rng, np.random.Generator) else rng
        self.config = KMeansConfig(
            n_clusters=n_clusters, max_iterations=max_iterations, seed=seed
        )
        self.config.validate()

        self.K = n_clusters
        self.n_iters = max_iterations
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(seed)
        self.logger = logger

        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None
        self.clusters: List[Cluster] = []

        # агрегированные тайминги за один вызов fit(...)
        self.t_assign_total: float = 0.0
        self.t_update_total: float = 0.0
        self.t_iter_total: float = 0.0

        self.n_iters_actual: int = 0
        self.converged: bool = False

    @property
    def run_name(self) -> str:
        """Имя реализации для префикса логов."""
        return ""

    def init_centroids(self, X: np.ndarray) -> np.ndarray:
        """
        Случайные центроиды внутри наблюдаемого диапазона признаков.

        Каждая координата выбирается равномерно в [min, max] своего
        признака: (1 - u) * min + u * max, u ~ U[0, 1).
        """
        mins, maxs = feature_ranges(X)
        u = self.rng.random((self.K, X.shape[1]))
        # выпуклая комбинация не переполняется даже при max - min > float max
        centroids = (1.0 - u) * mins + u * maxs
        # округление не должно выводить координату за границы диапазона
        return np.clip(centroids, mins, maxs)

    def fit(
        self,
        items: Iterable[Any],
        features: Callable[[Any], Sequence[float]] = default_features,
    ) -> List[Cluster]:
        """
        Основной цикл KMeans с остановкой по сходимости разбиения.

        Алгоритм останавливается, когда:
        - Разбиение объектов по кластерам не изменилось между двумя
          последовательными шагами назначения, ИЛИ
        - Достигнуто максимальное количество итераций (max_iterations)

        Возвращает K кластеров: последний вычисленный центроид и состав
        по последнему выполненному шагу назначения. Для пустого набора
        объектов возвращает пустой список.
        """
        items = list(items)

        # сбрасываем состояние предыдущего запуска
        self.t_assign_total = 0.0
        self.t_update_total = 0.0
        self.t_iter_total = 0.0
        self.n_iters_actual = 0
        self.converged = False
        self.labels = None
        self.centroids = None
        self.clusters = []

        if not items:
            return []

        X = extract_features(items, features)
        N, D = X.shape
        prefix = format_run_prefix({"N": N, "D": D, "K": self.K, "distance": self.run_name})

        centroids = self.init_centroids(X)
        clusters: List[Cluster] = [Cluster(centroid=c.copy()) for c in centroids]
        previous_labels: np.ndarray | None = None

        assign_timer = Timer()
        update_timer = Timer()

        for i in range(self.n_iters):
            with assign_timer:
                labels = self.assign_clusters(X, centroids)
                self._fill_members(clusters, items, labels)
            self.labels = labels

            # На первом шаге сравнивать не с чем
            converged = previous_labels is not None and np.array_equal(labels, previous_labels)

            t_update_elapsed = 0.0
            if not converged:
                with update_timer:
                    centroids = self.update_centroids(X, labels, centroids)
                t_update_elapsed = update_timer.elapsed
                for cluster, centroid in zip(clusters, centroids):
                    cluster.centroid = centroid.copy()

            t_assign_elapsed = assign_timer.elapsed
            self.t_assign_total = assign_timer.total
            self.t_update_total = update_timer.total
            self.t_iter_total += t_assign_elapsed + t_update_elapsed
            self.n_iters_actual = i + 1

            if self.logger and (i == 0 or (i + 1) % 10 == 0 or converged):
                status = " (converged)" if converged else ""
                self.logger.info(
                    f"{prefix} Iteration {i + 1}/{self.n_iters}{status} "
                    f"(T_assign={t_assign_elapsed:.6f}s, "
                    f"T_update={t_update_elapsed:.6f}s, "
                    f"sizes={[c.size for c in clusters]})"
                )

            if converged:
                self.converged = True
                if self.logger:
                    self.logger.info(
                        f"{prefix} Convergence reached after {i + 1} iterations"
                    )
                break

            previous_labels = labels

        self.centroids = centroids
        self.clusters = clusters
        return clusters

    @staticmethod
    def _fill_members(clusters: List[Cluster], items: List[Any], labels: np.ndarray) -> None:
        """Пересобирает списки членов кластеров по вектору меток."""
        for cluster in clusters:
            cluster.clear()
        for item, label in zip(items, labels):
            clusters[label].members.append(item)

    @abstractmethod
    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Шаг назначения точек кластерам."""
        raise NotImplementedError

    @abstractmethod
    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> np.ndarray:
        """Шаг обновления центроидов по присвоенным меткам."""
        raise NotImplementedError
