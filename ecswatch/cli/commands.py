from __future__ import annotations

import json
import logging
import os
import sys

from ecswatch.cluster import ClusterClient, WatchError
from ecswatch.config import ConfigError, WatchConfig, resolve_config
from ecswatch.watch import Watcher

from .args import build_parser

logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = resolve_config(args)
        client = build_client(config)

        if config.detail:
            cmd_detail(client, config)
        if config.one_shot:
            return cmd_one_shot(client, config)
        return cmd_watch(client, config)

    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except WatchError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        return 0


def build_client(config: WatchConfig) -> ClusterClient:
    logger.debug("using profile %s in %s", config.profile, config.region)
    return ClusterClient.from_profile(config.profile, config.region)


def cmd_detail(client: ClusterClient, config: WatchConfig) -> None:
    ids = client.list_task_ids(config.cluster)
    for response in client.describe_tasks_raw(config.cluster, ids):
        print(json.dumps(response, indent=2, default=str))


def cmd_one_shot(client: ClusterClient, config: WatchConfig) -> int:
    Watcher(client, config.cluster).run_once()
    return 0


def cmd_watch(client: ClusterClient, config: WatchConfig) -> int:
    Watcher(client, config.cluster, interval_s=config.interval_s).watch()
    return 0


def _setup_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        name = os.getenv("LOGLEVEL", "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
