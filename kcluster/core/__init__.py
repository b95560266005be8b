from .base import KMeansBase
from .cluster import Cluster, Clusterable, FeatureItem, default_features
from .config import KMeansConfig
from .engine import KMeans, k_cluster

__all__ = [
    "Cluster",
    "Clusterable",
    "FeatureItem",
    "KMeans",
    "KMeansBase",
    "KMeansConfig",
    "default_features",
    "k_cluster",
]
