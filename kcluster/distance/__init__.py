from .metrics import (
    DISTANCES,
    DistanceFn,
    FeatureVector,
    euclidean_distance,
    get_distance,
    manhattan_distance,
    pearson_distance,
)

__all__ = [
    "DISTANCES",
    "DistanceFn",
    "FeatureVector",
    "euclidean_distance",
    "get_distance",
    "manhattan_distance",
    "pearson_distance",
]
