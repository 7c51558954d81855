class WatchError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class TaskListLookupError(WatchError):
    def __init__(self, cluster_name: str, source: Exception):
        super().__init__(
            f'Failed to lookup tasks for cluster "{cluster_name}": {source}'
        )
        self.cluster_name = cluster_name
        self.source = source


class TaskDescribeError(WatchError):
    def __init__(self, cluster_name: str, source: Exception):
        super().__init__(
            f'Failed to lookup task definitions for cluster "{cluster_name}": {source}'
        )
        self.cluster_name = cluster_name
        self.source = source


class ClusterNotFoundError(WatchError):
    def __init__(self, cluster_name: str):
        super().__init__(f'Failed to find ECS cluster "{cluster_name}"')
        self.cluster_name = cluster_name
