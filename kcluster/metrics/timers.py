"""
Таймер шагов алгоритма на основе time.perf_counter().

Один экземпляр Timer переиспользуется на всех итерациях fit: ``elapsed``
хранит длительность последнего замера, ``total`` и ``laps`` накапливают
время и число замеров шага за весь запуск.
"""
from __future__ import annotations

import time
from typing import Any


class Timer:
    """
    Накопительный контекстный менеджер для одного шага алгоритма.

        assign_timer = Timer()
        for _ in range(n_iters):
            with assign_timer:
                labels = model.assign_clusters(X, centroids)
        assign_timer.total, assign_timer.laps
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Обнуляет последний замер и накопленные значения."""
        self.start: float = 0.0
        self.elapsed: float = 0.0
        self.total: float = 0.0
        self.laps: int = 0

    @property
    def mean(self) -> float:
        """Средняя длительность замера (0 до первого замера)."""
        return self.total / self.laps if self.laps else 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.elapsed = time.perf_counter() - self.start
        self.total += self.elapsed
        self.laps += 1
