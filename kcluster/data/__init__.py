from .validation import extract_features, feature_ranges

__all__ = ["extract_features", "feature_ranges"]
