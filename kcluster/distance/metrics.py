"""
Метрики расстояния между векторами признаков.

Каждая метрика — чистая функция вида ``distance(a, b) -> float``.
Движок KMeans принимает любую функцию с такой сигнатурой, встроенные
метрики лишь покрывают типичные случаи.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Sequence, Union

import numpy as np

from kcluster.errors import InvalidParameter, LengthMismatch

FeatureVector = Union[Sequence[float], np.ndarray]
DistanceFn = Callable[[FeatureVector, FeatureVector], float]


def _as_pair(a: FeatureVector, b: FeatureVector) -> tuple[np.ndarray, np.ndarray]:
    """Приводит оба вектора к float64 и проверяет совпадение длин."""
    va = np.asarray(a, dtype=np.float64).ravel()
    vb = np.asarray(b, dtype=np.float64).ravel()
    if va.shape[0] != vb.shape[0]:
        raise LengthMismatch(
            f"The number of elements in v1 ({va.shape[0]}) must equal "
            f"the number of elements in v2 ({vb.shape[0]})"
        )
    return va, vb


def manhattan_distance(a: FeatureVector, b: FeatureVector) -> float:
    """
    Манхэттенское расстояние: сумма модулей разностей координат.

    Raises:
        LengthMismatch: Если длины векторов различаются
    """
    va, vb = _as_pair(a, b)
    return float(np.sum(np.abs(va - vb)))


def euclidean_distance(a: FeatureVector, b: FeatureVector) -> float:
    """
    Евклидово расстояние: корень из суммы квадратов разностей.

    Raises:
        LengthMismatch: Если длины векторов различаются
    """
    va, vb = _as_pair(a, b)
    diff = va - vb
    return float(math.sqrt(np.dot(diff, diff)))


def pearson_distance(a: FeatureVector, b: FeatureVector) -> float:
    """
    Расстояние на основе коэффициента корреляции Пирсона: ``1 - r``.

    Значение лежит в диапазоне [0, 2]: 0 — векторы идеально
    коррелированы, 2 — идеально антикоррелированы.

    Требует более одного элемента в векторе. Если знаменатель
    обращается в ноль (n <= 1 или один из векторов постоянен),
    возвращается 0 вместо ошибки деления.

    Raises:
        LengthMismatch: Если длины векторов различаются
    """
    va, vb = _as_pair(a, b)
    n = va.shape[0]
    if n <= 1 or np.ptp(va) == 0.0 or np.ptp(vb) == 0.0:
        return 0.0

    da = va - va.mean()
    db = vb - vb.mean()

    den = math.sqrt(float(np.dot(da, da)) * float(np.dot(db, db)))
    if den == 0.0:
        return 0.0

    # r за пределами [-1, 1] возможен только из-за округления
    r = min(1.0, max(-1.0, float(np.dot(da, db)) / den))
    return 1.0 - r


DISTANCES: Dict[str, DistanceFn] = {
    "manhattan": manhattan_distance,
    "euclidean": euclidean_distance,
    "pearson": pearson_distance,
}


def get_distance(name: str) -> DistanceFn:
    """Возвращает встроенную метрику по имени."""
    try:
        return DISTANCES[name]
    except KeyError:
        raise InvalidParameter(
            f"Unknown distance '{name}', expected one of {sorted(DISTANCES)}"
        ) from None
