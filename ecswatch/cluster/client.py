"""Thin wrapper over the boto3 ECS client.

This is the only module that talks to AWS. Every botocore failure is
translated into one of the ``WatchError`` subclasses so callers never
see botocore exception types.
"""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from ecswatch.config import ConfigError

from .types import ClusterNotFoundError, TaskDescribeError, TaskListLookupError

logger = logging.getLogger(__name__)

# DescribeTasks accepts at most this many task ids per request.
DESCRIBE_BATCH = 100


class ClusterClient:
    def __init__(self, ecs: Any):
        self.ecs = ecs

    @classmethod
    def from_profile(cls, profile: str, region: str) -> ClusterClient:
        try:
            session = boto3.Session(profile_name=profile, region_name=region)
            ecs = session.client("ecs")
        except ProfileNotFound as exc:
            raise ConfigError(f"AWS profile not found: {profile}") from exc
        return cls(ecs)

    def list_task_ids(self, cluster: str) -> list[str]:
        task_ids: list[str] = []
        request: dict[str, Any] = {"cluster": cluster}

        while True:
            try:
                response = self.ecs.list_tasks(**request)
            except ClientError as exc:
                if _error_code(exc) == "ClusterNotFoundException":
                    raise ClusterNotFoundError(cluster) from exc
                raise TaskListLookupError(cluster, exc) from exc
            except BotoCoreError as exc:
                raise TaskListLookupError(cluster, exc) from exc

            if response.get("taskArns") is None:
                raise ClusterNotFoundError(cluster)

            task_ids.extend(response["taskArns"])
            token = response.get("nextToken")
            if not token:
                break
            request["nextToken"] = token

        logger.debug("list_tasks %s -> %d ids", cluster, len(task_ids))
        return task_ids

    def describe_tasks_raw(self, cluster: str, ids: list[str]) -> list[dict[str, Any]]:
        responses: list[dict[str, Any]] = []
        for start in range(0, len(ids), DESCRIBE_BATCH):
            batch = ids[start : start + DESCRIBE_BATCH]
            try:
                response = self.ecs.describe_tasks(cluster=cluster, tasks=batch)
            except (ClientError, BotoCoreError) as exc:
                raise TaskDescribeError(cluster, exc) from exc
            responses.append(response)
        return responses

    def describe_tasks(self, cluster: str, ids: list[str]) -> list[dict[str, Any]]:
        tasks: list[dict[str, Any]] = []
        for response in self.describe_tasks_raw(cluster, ids):
            tasks.extend(response.get("tasks") or [])
        logger.debug("describe_tasks %s -> %d records", cluster, len(tasks))
        return tasks


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")
