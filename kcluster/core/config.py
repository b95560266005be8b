from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Optional

from kcluster.errors import InvalidParameter


@dataclass(frozen=True)
class KMeansConfig:
    """Параметры одного запуска KMeans."""

    n_clusters: int
    max_iterations: int = 100
    seed: Optional[int] = None

    def validate(self) -> None:
        """Проверяет параметры до начала работы алгоритма."""
        if not _is_int(self.n_clusters) or self.n_clusters < 1:
            raise InvalidParameter(
                f"n_clusters must be an integer >= 1, got {self.n_clusters!r}"
            )
        if not _is_int(self.max_iterations) or self.max_iterations < 0:
            raise InvalidParameter(
                f"max_iterations must be an integer >= 0, got {self.max_iterations!r}"
            )
        if self.seed is not None and (not _is_int(self.seed) or self.seed < 0):
            raise InvalidParameter(f"seed must be a non-negative integer, got {self.seed!r}")


def _is_int(value: object) -> bool:
    # bool — подкласс int, но как число кластеров не имеет смысла
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
