"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest
from sklearn.datasets import make_blobs

from kcluster.core.cluster import FeatureItem


def make_items(rows):
    """Оборачивает строки признаков в FeatureItem с порядковыми ключами."""
    return [
        FeatureItem(key=i, values=tuple(float(v) for v in row))
        for i, row in enumerate(rows)
    ]


@pytest.fixture
def line_items():
    """Две явно разделённые группы на прямой: {1, 2, 3} и {100, 101, 102}."""
    return make_items([[1.0], [2.0], [3.0], [100.0], [101.0], [102.0]])


@pytest.fixture
def simple_2d_items():
    """Очень простой 2D датасет для базовых тестов."""
    return make_items([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])


@pytest.fixture
def blobs_dataset():
    """Три хорошо разделённых кластера в 4D (make_blobs)."""
    X, y = make_blobs(
        n_samples=150,
        n_features=4,
        centers=[[0.0] * 4, [20.0] * 4, [-20.0] * 4],
        cluster_std=1.0,
        random_state=42,
    )
    return make_items(X), y


@pytest.fixture
def item_factory():
    """Фабрика FeatureItem из произвольных строк признаков."""
    return make_items
