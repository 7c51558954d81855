"""Render task snapshots to the terminal.

A line is underlined when the next task's timestamp is at least an hour
later, flagging a break in the task history. Styling follows the usual
conventions: on for a TTY, off when NO_COLOR is set, forced on with
FORCE_COLOR.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from typing import TextIO

from ecswatch.summary import TaskSummary

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
TIME_BREAK = timedelta(hours=1)

UNDERLINE = "\033[4m"
RESET = "\033[0m"


def use_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}:
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def should_render(
    previous: Sequence[TaskSummary] | None, current: Sequence[TaskSummary]
) -> bool:
    if previous is None:
        return True
    return list(previous) != list(current)


def time_breaks(summary: Sequence[TaskSummary]) -> set[int]:
    return {
        i
        for i in range(len(summary) - 1)
        if summary[i + 1].timestamp - summary[i].timestamp >= TIME_BREAK
    }


def format_line(task: TaskSummary) -> str:
    return (
        f"{task.timestamp.strftime(DATE_TIME_FORMAT)}  "
        f"{task.last_status:<14} {task.task_version} {json.dumps(list(task.images))}"
    )


def format_summary(
    summary: Sequence[TaskSummary],
    rendered_at: datetime,
    *,
    emphasis: bool = True,
) -> list[str]:
    breaks = time_breaks(summary) if emphasis else set()
    lines = [rendered_at.strftime(DATE_TIME_FORMAT)]
    for index, task in enumerate(summary):
        line = format_line(task)
        if index in breaks:
            line = f"{UNDERLINE}{line}{RESET}"
        lines.append(line)
    return lines


def print_summary(
    summary: Sequence[TaskSummary],
    *,
    out: TextIO | None = None,
    now: Callable[[], datetime] = utc_now,
) -> None:
    stream = out or sys.stdout
    for line in format_summary(summary, now(), emphasis=use_color(stream)):
        print(line, file=stream)
    stream.flush()
