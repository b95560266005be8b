"""
Типы данных кластеризации: кластер и способность "иметь признаки".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    Generic,
    Hashable,
    List,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    runtime_checkable,
)

import numpy as np


@runtime_checkable
class Clusterable(Protocol):
    """Любой объект, умеющий вернуть вектор признаков фиксированной длины."""

    def features(self) -> Sequence[float]:
        ...


T = TypeVar("T")


def default_features(item: Any) -> Sequence[float]:
    """Адаптер по умолчанию: вызывает ``item.features()``."""
    return item.features()


@dataclass(frozen=True)
class FeatureItem:
    """Простая обёртка: ключ объекта + его вектор признаков."""

    key: Hashable
    values: Tuple[float, ...]

    def features(self) -> Sequence[float]:
        return self.values


@dataclass(eq=False)
class Cluster(Generic[T]):
    """
    Кластер: текущий центроид и список назначенных объектов.

    Объекты в ``members`` — ссылки на элементы вызывающей стороны,
    движок их не копирует и не изменяет.
    """

    centroid: np.ndarray
    members: List[T] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.members)

    def clear(self) -> None:
        """Сбрасывает список членов перед очередным шагом назначения."""
        self.members.clear()
