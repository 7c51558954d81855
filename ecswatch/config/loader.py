import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ConfigError, FileSettings, UnsupportedConfigFormatError


def load_settings(path: str | Path) -> FileSettings:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_settings(pure_path, raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Unsupported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_settings(path: Path, raw: Mapping[str, Any]) -> FileSettings:
    keys = {"cluster", "profile", "region", "interval"}
    settings = FileSettings()

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"{path}: Can't process: {field}")

    for field in ("cluster", "profile", "region"):
        if field not in raw:
            continue

        value = raw[field]
        if not isinstance(value, str):
            raise ConfigError(f"{path}: '{field}' should be a string")

        if len(value.strip()) < 1:
            raise ConfigError(f"{path}: '{field}' can't be empty")

        setattr(settings, field, value.strip())

    if "interval" in raw:
        interval = raw["interval"]
        # bool is an int subclass
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ConfigError(f"{path}: 'interval' should be an integer")

        if interval < 1:
            raise ConfigError(f"{path}: 'interval' must be at least 1 second")

        settings.interval = interval

    return settings
