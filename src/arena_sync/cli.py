# Area: Shared
"""
arena_sync.cli — Command-line interface
=======================================

Provides CLI entry point for running the arena server.

Usage:
    python -m arena_sync                           # Defaults (port 3000)
    python -m arena_sync --config arena.json       # Run with config file
    python -m arena_sync --port 8765 --debug

Settings can also come from environment variables or a .env file:
    ARENA_HOST, ARENA_PORT, ARENA_LOG_FILE, ARENA_LOG_LEVEL,
    ARENA_COLLECTIBLE_VALUE
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from ._runner_config import load_settings
from ._shared import log_and_terminate
from .errors import ConfigurationError, InvalidPositionError
from .runner import ArenaRunner


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Arena Sync - real-time state server for the arena game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m arena_sync
  python -m arena_sync --config arena.json
  ARENA_PORT=8765 python -m arena_sync --debug
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--host",
        type=str,
        help="Interface to bind (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (default: 3000)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to the JSON log file (default: arena_sync.log)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Turn CLI flags into settings overrides."""
    overrides: Dict[str, Any] = {
        "host": args.host,
        "port": args.port,
        "log_file": args.log_file,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.config, overrides=build_overrides(args))
    except ConfigurationError as e:
        print(e.format_error_log(), file=sys.stderr)
        return 1

    try:
        runner = ArenaRunner(settings)
    except InvalidPositionError as e:
        log_and_terminate(e)
        return 1

    runner.run()
    return 0
