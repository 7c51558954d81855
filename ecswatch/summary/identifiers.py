from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def task_version(task_definition_arn: str | None) -> str:
    """Return the short task definition, e.g. ``family:7``."""
    return (task_definition_arn or "").split("/")[-1]


def short_image(image: str | None) -> str:
    """Return a short image name, dropping the registry part."""
    if image is None:
        return ""
    parts = image.split("/")
    if len(parts) > 1:
        return "/".join(parts[1:])
    return image


def images(containers: Iterable[Mapping[str, Any]] | None) -> tuple[str, ...]:
    return tuple(short_image(c.get("image")) for c in containers or ())
