"""
Тесты проверки входных данных.
"""

import numpy as np
import pytest

from kcluster.core.cluster import FeatureItem, default_features
from kcluster.data.validation import extract_features, feature_ranges
from kcluster.errors import DimensionMismatch, InvalidFeatures


class TestExtractFeatures:
    """Тесты сборки матрицы признаков."""

    def test_shape_and_dtype(self, simple_2d_items):
        X = extract_features(simple_2d_items, default_features)

        assert X.shape == (6, 2)
        assert X.dtype == np.float64
        np.testing.assert_array_equal(X[3], [10.0, 10.0])

    def test_integer_features_converted(self):
        X = extract_features([[1, 2], [3, 4]], features=lambda row: row)
        assert X.dtype == np.float64

    def test_length_mismatch(self):
        items = [FeatureItem(0, (1.0, 2.0, 3.0)), FeatureItem(1, (1.0, 2.0))]
        with pytest.raises(DimensionMismatch, match="Item #1 has 2 features, expected 3"):
            extract_features(items, default_features)

    def test_empty_vector(self):
        with pytest.raises(DimensionMismatch):
            extract_features([FeatureItem(0, ())], default_features)

    def test_nested_vector(self):
        with pytest.raises(DimensionMismatch):
            extract_features([[[1.0], [2.0]]], features=lambda row: row)

    def test_non_numeric(self):
        with pytest.raises(InvalidFeatures):
            extract_features([["a", "b"]], features=lambda row: row)

    def test_nan_reported_with_index(self):
        rows = [[0.0, 1.0], [2.0, 3.0], [np.nan, 1.0]]
        with pytest.raises(InvalidFeatures, match="Item #2"):
            extract_features(rows, features=lambda row: row)


class TestFeatureRanges:
    """Тесты диапазонов признаков."""

    def test_ranges(self):
        X = np.array([[1.0, -5.0], [3.0, 0.0], [2.0, 7.5]])
        mins, maxs = feature_ranges(X)

        np.testing.assert_array_equal(mins, [1.0, -5.0])
        np.testing.assert_array_equal(maxs, [3.0, 7.5])
