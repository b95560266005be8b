"""
Сводные характеристики результата кластеризации.

Модуль предоставляет функции для оценки размеров кластеров и
суммарного расстояния объектов до центроидов (inertia).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

import numpy as np

from kcluster.core.cluster import Cluster, default_features
from kcluster.distance.metrics import DistanceFn


def cluster_sizes(clusters: Sequence[Cluster]) -> List[int]:
    """Количество объектов в каждом кластере (в порядке создания)."""
    return [cluster.size for cluster in clusters]


def inertia(
    clusters: Sequence[Cluster],
    distance: DistanceFn,
    features: Callable[[Any], Sequence[float]] = default_features,
) -> float:
    """
    Сумма расстояний от объектов до центроидов их кластеров.

    Args:
        clusters: Результат k_cluster / KMeans.fit
        distance: Метрика, которой измеряется расстояние
        features: Адаптер признаков (тот же, что при кластеризации)

    Returns:
        Неотрицательная сумма для метрик с неотрицательными значениями
    """
    total = 0.0
    for cluster in clusters:
        for member in cluster.members:
            total += float(distance(cluster.centroid, features(member)))
    return total


def size_summary(clusters: Sequence[Cluster]) -> Dict[str, float]:
    """
    Статистика размеров кластеров.

    Позволяет обнаружить один доминирующий кластер: его размер
    ``max`` значительно превышает ``mean + std``.

    Returns:
        Словарь с ключами ``mean``, ``std``, ``min``, ``max``, ``empty``.
        Для пустого списка кластеров все значения равны нулю.
    """
    sizes = np.asarray(cluster_sizes(clusters), dtype=np.float64)
    if sizes.size == 0:
        return {"mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0, "empty": 0}

    return {
        "mean": float(np.mean(sizes)),
        "std": float(np.std(sizes)),
        "min": float(np.min(sizes)),
        "max": float(np.max(sizes)),
        "empty": int(np.sum(sizes == 0)),
    }
