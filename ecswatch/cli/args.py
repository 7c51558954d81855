from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecswatch",
        description="Watch AWS Elastic Container Service (ECS) cluster changes",
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to an optional config file (.yml/.yaml, .toml, .json)",
    )
    parser.add_argument(
        "-c",
        "--cluster",
        help="Cluster name to watch [env: AWS_ECS_CLUSTER]",
    )
    parser.add_argument(
        "-p",
        "--aws-profile",
        help="AWS profile, an entry in ~/.aws/credentials [env: AWS_PROFILE]",
    )
    parser.add_argument(
        "-r",
        "--aws-region",
        help="AWS region to target [env: AWS_DEFAULT_REGION, default: us-east-1]",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        default=None,
        help="Seconds between polls (default: 2)",
    )
    parser.add_argument(
        "-d",
        "--detail",
        action="store_true",
        help="Output the full task description response",
    )
    parser.add_argument(
        "-o",
        "--one-shot",
        action="store_true",
        help="Output the summary once and exit instead of watching for changes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log API calls and poll decisions to stderr",
    )

    return parser
