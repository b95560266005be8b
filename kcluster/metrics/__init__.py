from .timers import Timer
from .quality import cluster_sizes, inertia, size_summary

__all__ = [
    "Timer",
    "cluster_sizes",
    "inertia",
    "size_summary",
]
