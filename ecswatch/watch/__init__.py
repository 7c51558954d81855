from .printer import format_line, format_summary, print_summary, should_render, time_breaks
from .scheduler import Watcher, sleep_duration

__all__ = [
    "Watcher",
    "format_line",
    "format_summary",
    "print_summary",
    "should_render",
    "sleep_duration",
    "time_breaks",
]
