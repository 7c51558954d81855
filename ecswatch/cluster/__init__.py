from .client import ClusterClient
from .types import (
    ClusterNotFoundError,
    TaskDescribeError,
    TaskListLookupError,
    WatchError,
)

__all__ = [
    "ClusterClient",
    "ClusterNotFoundError",
    "TaskDescribeError",
    "TaskListLookupError",
    "WatchError",
]
