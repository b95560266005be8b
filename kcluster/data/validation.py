"""
Проверка входных данных перед кластеризацией.

Модуль собирает векторы признаков объектов в матрицу и проверяет,
что все они одной длины и содержат только конечные значения.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Tuple

import numpy as np

from kcluster.errors import DimensionMismatch, InvalidFeatures


def extract_features(
    items: Sequence[Any],
    features: Callable[[Any], Sequence[float]],
) -> np.ndarray:
    """
    Собирает матрицу признаков (N, D) из последовательности объектов.

    Args:
        items: Непустая последовательность объектов
        features: Адаптер, возвращающий вектор признаков объекта

    Returns:
        Матрица float64 формы (N, D)

    Raises:
        DimensionMismatch: Если длины векторов различаются или равны нулю
        InvalidFeatures: Если признаки не приводятся к float или не конечны
    """
    rows = []
    n_features: int | None = None

    for idx, item in enumerate(items):
        try:
            row = np.asarray(features(item), dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidFeatures(
                f"Item #{idx}: features are not convertible to float ({e})"
            ) from e

        if row.ndim != 1:
            raise DimensionMismatch(
                f"Item #{idx}: expected a flat feature vector, got shape {row.shape}"
            )

        if n_features is None:
            n_features = row.shape[0]
            if n_features == 0:
                raise DimensionMismatch("Feature vectors must not be empty")
        elif row.shape[0] != n_features:
            raise DimensionMismatch(
                f"Item #{idx} has {row.shape[0]} features, expected {n_features}"
            )

        rows.append(row)

    X = np.vstack(rows)

    if not np.all(np.isfinite(X)):
        bad = int(np.argmax(~np.all(np.isfinite(X), axis=1)))
        raise InvalidFeatures(f"Item #{bad} contains non-finite feature values")

    return X


def feature_ranges(X: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Минимум и максимум каждого признака по всем объектам."""
    return X.min(axis=0), X.max(axis=0)
