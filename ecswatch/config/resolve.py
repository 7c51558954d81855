"""Merge CLI flags, environment variables and the optional config file.

Precedence per setting: flag, then environment, then file, then default.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping

from botocore.loaders import create_loader
from botocore.regions import EndpointResolver

from .loader import load_settings
from .types import (
    DEFAULT_INTERVAL_S,
    DEFAULT_REGION,
    ConfigError,
    FileSettings,
    WatchConfig,
)

ENV_CLUSTER = "AWS_ECS_CLUSTER"
ENV_PROFILE = "AWS_PROFILE"
ENV_REGION = "AWS_DEFAULT_REGION"
ENV_CONFIG = "ECSWATCH_CONFIG"


def resolve_config(
    args: argparse.Namespace, environ: Mapping[str, str] | None = None
) -> WatchConfig:
    env = os.environ if environ is None else environ

    config_path = args.config or env.get(ENV_CONFIG)
    settings = load_settings(config_path) if config_path else FileSettings()

    cluster = _first(args.cluster, env.get(ENV_CLUSTER), settings.cluster)
    profile = _first(args.aws_profile, env.get(ENV_PROFILE), settings.profile)
    region = _first(args.aws_region, env.get(ENV_REGION), settings.region)
    interval = args.interval if args.interval is not None else settings.interval

    if cluster is None:
        raise ConfigError(f"Missing cluster name: use --cluster or set {ENV_CLUSTER}")

    if profile is None:
        raise ConfigError(f"Missing AWS profile: use --aws-profile or set {ENV_PROFILE}")

    if interval is not None and interval < 1:
        raise ConfigError("The interval must be at least 1 second")

    region = region or DEFAULT_REGION
    validate_region(region)

    return WatchConfig(
        cluster=cluster,
        profile=profile,
        region=region,
        interval_s=interval or DEFAULT_INTERVAL_S,
        detail=args.detail,
        one_shot=args.one_shot,
    )


def validate_region(region: str) -> None:
    resolver = EndpointResolver(create_loader().load_data("endpoints"))
    for partition in resolver.get_available_partitions():
        if region in resolver.get_available_endpoints("ecs", partition):
            return
    raise ConfigError(f"Unknown AWS region: {region}")


def _first(*values: str | None) -> str | None:
    for value in values:
        if value is not None and value.strip():
            return value.strip()
    return None
