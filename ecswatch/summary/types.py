from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TaskSummary:
    timestamp: datetime
    last_status: str
    task_version: str
    images: tuple[str, ...]
