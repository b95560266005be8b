"""
Исключения библиотеки kcluster.

Все ошибки наследуются от ValueError: это нарушения предусловий,
которые обнаруживаются на границе API до начала кластеризации.
"""

from __future__ import annotations


class ClusteringError(ValueError):
    """Базовый класс ошибок кластеризации."""


class LengthMismatch(ClusteringError):
    """В функцию расстояния переданы векторы разной длины."""


class DimensionMismatch(ClusteringError):
    """Векторы признаков объектов имеют разную (или нулевую) длину."""


class InvalidParameter(ClusteringError):
    """Некорректные параметры запуска (k < 1, max_iterations < 0 и т.п.)."""


class InvalidFeatures(ClusteringError):
    """Признаки содержат NaN/inf или не приводятся к float."""
