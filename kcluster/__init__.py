from .core import (
    Cluster,
    Clusterable,
    FeatureItem,
    KMeans,
    KMeansConfig,
    k_cluster,
)
from .distance import (
    euclidean_distance,
    get_distance,
    manhattan_distance,
    pearson_distance,
)
from .errors import (
    ClusteringError,
    DimensionMismatch,
    InvalidFeatures,
    InvalidParameter,
    LengthMismatch,
)

__version__ = "0.1.0"

__all__ = [
    "Cluster",
    "Clusterable",
    "ClusteringError",
    "DimensionMismatch",
    "FeatureItem",
    "InvalidFeatures",
    "InvalidParameter",
    "KMeans",
    "KMeansConfig",
    "LengthMismatch",
    "euclidean_distance",
    "get_distance",
    "k_cluster",
    "manhattan_distance",
    "pearson_distance",
]
