from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from clusterlog.app import update_cluster_logging
from clusterlog.config import configure_logging, load_cluster_file, require_env_vars
from clusterlog.config.control_plane import REGION_ENV
from clusterlog.domain.capabilities import ALL_TOKEN, CapabilityError, supported_cluster_log_types
from clusterlog.domain.cluster import ClusterRef

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from clusterlog.config import ClusterFileSpec

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage cluster configuration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    logging_cmd = subparsers.add_parser(
        "update-cluster-logging",
        help="Update cluster logging configuration",
    )
    logging_cmd.add_argument(
        "-n",
        "--cluster",
        type=str,
        help="Name of the cluster",
    )
    logging_cmd.add_argument(
        "-r",
        "--region",
        type=str,
        help="Control-plane region (defaults to CLUSTERLOG_REGION)",
    )
    logging_cmd.add_argument(
        "-f",
        "--config-file",
        type=Path,
        help="Load cluster name, region and log types from a ClusterConfig YAML file",
    )
    supported = ", ".join(supported_cluster_log_types())
    logging_cmd.add_argument(
        "--enable-types",
        action="append",
        default=None,
        metavar="TYPE",
        help=(
            "Log type to be enabled, the rest will be disabled; may be repeated. "
            f"Supported log types: ({ALL_TOKEN},{supported})"
        ),
    )
    logging_cmd.add_argument(
        "--approve",
        action="store_true",
        help="Apply the changes (without it the command only reports them)",
    )
    logging_cmd.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(list(argv))


def _resolve_target(args: argparse.Namespace) -> tuple[ClusterRef, list[str]]:
    if args.config_file is not None:
        if args.enable_types:
            raise ValueError("cannot use --enable-types when --config-file/-f is set")
        if args.cluster:
            raise ValueError("cannot use --cluster when --config-file/-f is set")
        spec: ClusterFileSpec = load_cluster_file(args.config_file, region=args.region)
        return spec.cluster, list(spec.enable_types)

    if not args.cluster:
        raise ValueError("--cluster must be set")
    region = args.region or _region_from_environment()
    return ClusterRef(name=args.cluster, region=region), list(args.enable_types or [])


def _region_from_environment() -> str:
    return require_env_vars((REGION_ENV,))[REGION_ENV]


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.verbose:
            configure_logging(level=logging.DEBUG, force=True)
        cluster, enable_types = _resolve_target(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Failed to load configuration")
        sys.exit(1)

    try:
        if parsed_args.command == "update-cluster-logging":
            update_cluster_logging(
                cluster,
                enable_types,
                approve=parsed_args.approve,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except CapabilityError:
        log.exception("Invalid log types")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while updating cluster logging")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
