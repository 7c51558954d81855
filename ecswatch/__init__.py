"""Watch an ECS cluster and print a task summary whenever it changes."""

__version__ = "0.1.0"
