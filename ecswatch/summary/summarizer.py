from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from .identifiers import images, task_version
from .timestamps import now_seconds, newest_time
from .types import TaskSummary

logger = logging.getLogger(__name__)

EVENT_FIELDS = (
    "connectivityAt",
    "createdAt",
    "executionStoppedAt",
    "pullStartedAt",
    "pullStoppedAt",
    "startedAt",
)


class TaskSource(Protocol):
    def list_task_ids(self, cluster: str) -> list[str]: ...

    def describe_tasks(
        self, cluster: str, ids: list[str]
    ) -> list[Mapping[str, Any]]: ...


def summarize_task(
    record: Mapping[str, Any],
    now: Callable[[], float] = now_seconds,
) -> TaskSummary:
    return TaskSummary(
        timestamp=newest_time((record.get(f) for f in EVENT_FIELDS), now=now),
        last_status=record.get("lastStatus") or "",
        task_version=task_version(record.get("taskDefinitionArn")),
        images=images(record.get("containers")),
    )


def task_summary(
    client: TaskSource,
    cluster: str,
    now: Callable[[], float] = now_seconds,
) -> list[TaskSummary]:
    """Fetch the cluster's tasks and summarize them, oldest activity first.

    Errors raised by the client propagate unchanged.
    """
    ids = client.list_task_ids(cluster)
    records = client.describe_tasks(cluster, ids)
    logger.debug("cluster %s: %d task ids, %d records", cluster, len(ids), len(records))

    summaries = [summarize_task(record, now=now) for record in records]
    return sorted(summaries, key=lambda s: s.timestamp)
