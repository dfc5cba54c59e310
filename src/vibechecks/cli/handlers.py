"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from vibechecks.checker.cache import FingerprintCache
from vibechecks.checker.documents import open_document
from vibechecks.checker.oracle import OllamaOracle
from vibechecks.checker.orchestrator import VibeChecker
from vibechecks.checker.watcher import watch_files
from vibechecks.config import VibeChecksConfig, load_config
from vibechecks.constants.config import DEFAULT_POLL_INTERVAL_SECONDS
from vibechecks.constants.reporting import BATCH_STATUS_FAILED
from vibechecks.exceptions import ConfigError
from vibechecks.reporting.sarif_writer import write_sarif
from vibechecks.reporting.stdout import StdoutReporter


def resolve_config(args: argparse.Namespace) -> tuple[Path, VibeChecksConfig]:
    """Load workspace config and apply command-line overrides."""
    root = args.root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Workspace root does not exist or is not a directory: {root}")

    config = load_config(root, args.config)
    if args.model:
        config = replace(config, model_id=args.model)
    if getattr(args, "scope", None):
        config = replace(config, scope=args.scope)
    return root, config


def build_checker(args: argparse.Namespace) -> tuple[VibeChecker, OllamaOracle]:
    """Wire config, cache, transport, and reporter into a checker."""
    root, config = resolve_config(args)
    oracle = OllamaOracle(
        config.ollama_url,
        timeout=config.request_timeout,
        debug_dir=root if config.debug_prompt else None,
    )
    cache = FingerprintCache(None) if getattr(args, "no_cache", False) else None
    use_color = not args.no_color and sys.stdout.isatty()
    checker = VibeChecker(
        config=config,
        root=root,
        oracle=oracle,
        cache=cache,
        reporter=StdoutReporter(color=use_color),
    )
    return checker, oracle


def _write_sarif_if_requested(args: argparse.Namespace, checker: VibeChecker) -> None:
    if getattr(args, "sarif", None) is None:
        return
    diagnostics_by_uri = {checker.relative_path(path): found for path, found in checker.diagnostics.items()}
    write_sarif(args.sarif, diagnostics_by_uri)


async def handle_check(args: argparse.Namespace) -> int:
    """Check the given files one by one, notifying per file."""
    checker, oracle = build_checker(args)
    exit_code = 0
    try:
        for path in args.files:
            try:
                document = open_document(path)
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Could not open file: {path} ({exc})", file=sys.stderr)
                exit_code = max(exit_code, 2)
                continue
            result = await checker.check_document(document)
            if result is None:
                return 2
            if not result.passed:
                exit_code = max(exit_code, 1)
    finally:
        await oracle.close()
    _write_sarif_if_requested(args, checker)
    return exit_code


async def handle_check_changes(args: argparse.Namespace) -> int:
    """Check every git-changed file and print the batch summary."""
    checker, oracle = build_checker(args)
    try:
        summary = await checker.check_changes()
    finally:
        await oracle.close()
    if summary is None:
        return 2
    _write_sarif_if_requested(args, checker)
    return 1 if summary.status == BATCH_STATUS_FAILED else 0


async def handle_watch(args: argparse.Namespace) -> int:
    """Watch files until interrupted."""
    checker, oracle = build_checker(args)
    interval = args.interval if args.interval is not None else DEFAULT_POLL_INTERVAL_SECONDS
    print(f"Watching {len(args.files)} file(s) ({checker.config.run_on}); press Ctrl+C to stop.")
    try:
        await watch_files(checker, [path.resolve() for path in args.files], interval=interval)
    finally:
        await oracle.close()
    return 0


async def handle_models(args: argparse.Namespace) -> int:
    """List available models, marking the configured one."""
    _, config = resolve_config(args)
    oracle = OllamaOracle(config.ollama_url, timeout=config.request_timeout)
    try:
        models = await oracle.list_models()
    finally:
        await oracle.close()
    if not models:
        print("No models available.")
        return 0
    for model_id in models:
        marker = "*" if model_id == config.model_id else " "
        print(f"{marker} {model_id}")
    return 0


async def handle_clear_cache(args: argparse.Namespace) -> int:
    """Clear the workspace cache and delete its file."""
    root, config = resolve_config(args)
    checker = VibeChecker(
        config=config,
        root=root,
        oracle=OllamaOracle(config.ollama_url, timeout=config.request_timeout),
    )
    checker.clear_cache()
    return 0
