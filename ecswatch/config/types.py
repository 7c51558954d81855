from dataclasses import dataclass

DEFAULT_REGION = "us-east-1"
DEFAULT_INTERVAL_S = 2


@dataclass
class FileSettings:
    cluster: str | None = None
    profile: str | None = None
    region: str | None = None
    interval: int | None = None


@dataclass
class WatchConfig:
    cluster: str
    profile: str
    region: str = DEFAULT_REGION
    interval_s: int = DEFAULT_INTERVAL_S
    detail: bool = False
    one_shot: bool = False


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
