"""CLI entrypoint for vibechecks."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from vibechecks import __version__
from vibechecks.cli.handlers import (
    handle_check,
    handle_check_changes,
    handle_clear_cache,
    handle_models,
    handle_watch,
)
from vibechecks.constants.branding import CLI_DESCRIPTION, WATCH_DESCRIPTION
from vibechecks.constants.config import VALID_SCOPES
from vibechecks.exceptions import ConfigError, VibeChecksError


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: cwd)")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-m", "--model", default=None, help="Model id, overrides model_id from config")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show cache and transport diagnostics")


def _add_check_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scope",
        choices=sorted(VALID_SCOPES),
        default=None,
        help="Send the whole file or only its git diff to the model",
    )
    parser.add_argument("-n", "--no-cache", action="store_true", help="Disable cache reads/writes")
    parser.add_argument("--sarif", type=Path, default=None, help="Write diagnostics as SARIF to this path")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="vibechecks",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check files against the workspace instructions")
    check.add_argument("files", nargs="+", type=Path, help="Files to check")
    _add_common_arguments(check)
    _add_check_arguments(check)

    changes = subparsers.add_parser("check-changes", help="Check staged and modified files reported by git")
    _add_common_arguments(changes)
    _add_check_arguments(changes)

    watch = subparsers.add_parser(
        "watch",
        help="Re-check files whenever they are written",
        description=WATCH_DESCRIPTION,
    )
    watch.add_argument("files", nargs="+", type=Path, help="Files to watch")
    watch.add_argument("--interval", type=float, default=None, help="Polling interval in seconds")
    _add_common_arguments(watch)
    _add_check_arguments(watch)

    models = subparsers.add_parser("models", help="List models offered by the configured server")
    _add_common_arguments(models)

    clear = subparsers.add_parser("clear-cache", help="Delete cached model responses for the workspace")
    _add_common_arguments(clear)

    return parser


_HANDLERS = {
    "check": handle_check,
    "check-changes": handle_check_changes,
    "watch": handle_watch,
    "models": handle_models,
    "clear-cache": handle_clear_cache,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return asyncio.run(handler(args))
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except VibeChecksError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
