from .identifiers import images, short_image, task_version
from .summarizer import summarize_task, task_summary
from .timestamps import newest_time, to_datetime
from .types import TaskSummary

__all__ = [
    "TaskSummary",
    "images",
    "newest_time",
    "short_image",
    "summarize_task",
    "task_summary",
    "task_version",
    "to_datetime",
]
