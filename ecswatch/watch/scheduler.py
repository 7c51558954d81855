from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from ecswatch.config.types import DEFAULT_INTERVAL_S
from ecswatch.summary import TaskSummary, task_summary
from ecswatch.summary.summarizer import TaskSource

from .printer import print_summary, should_render

logger = logging.getLogger(__name__)

Printer = Callable[[Sequence[TaskSummary]], None]


def sleep_duration(seconds: int, now: Callable[[], float] = time.time) -> float:
    """How long to sleep to land on the next whole number of seconds."""
    millis = int((now() % 1) * 1000)
    return (1000 * seconds - millis) / 1000


class Watcher:
    def __init__(
        self,
        client: TaskSource,
        cluster: str,
        *,
        interval_s: int = DEFAULT_INTERVAL_S,
        printer: Printer = print_summary,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.cluster = cluster
        self.interval_s = interval_s
        self.printer = printer
        self.sleep = sleep or time.sleep
        self.clock = clock

    def _fetch(self) -> list[TaskSummary]:
        return task_summary(self.client, self.cluster)

    def run_once(self) -> list[TaskSummary]:
        summary = self._fetch()
        self.printer(summary)
        return summary

    def watch(self, *, max_cycles: int | None = None) -> None:
        """Print the summary, then again whenever it changes.

        Runs until a fetch fails or, when given, after ``max_cycles``
        polls following the initial one.
        """
        rendered = self.run_once()
        cycles = 0

        while max_cycles is None or cycles < max_cycles:
            self.sleep(sleep_duration(self.interval_s, now=self.clock))
            cycles += 1

            summary = self._fetch()
            if should_render(rendered, summary):
                logger.debug("cycle %d: summary changed", cycles)
                self.printer(summary)
                rendered = summary
            else:
                logger.debug("cycle %d: no change", cycles)
