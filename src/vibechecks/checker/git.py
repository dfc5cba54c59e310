"""Git change-set helpers: porcelain status parsing and per-file diffs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

from vibechecks.exceptions import GitError
from vibechecks.model import GitStatusFile

logger = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str], Path], Awaitable[str]]

_UNTRACKED = "??"


def parse_git_status(output: str) -> list[GitStatusFile]:
    """Split ``git status --porcelain`` output into status/filename pairs."""
    return [
        GitStatusFile(status=line[:2], filename=line[3:])
        for line in output.split("\n")
        if line.strip()
    ]


def is_check_candidate(entry: GitStatusFile) -> bool:
    """Return True for staged or tracked-and-modified entries, False for untracked ones."""
    if entry.status == _UNTRACKED:
        return False
    staged, worktree = (entry.status + "  ")[:2]
    return staged != " " or worktree != " "


def filter_candidates(output: str) -> list[GitStatusFile]:
    """Return the porcelain entries worth checking."""
    return [entry for entry in parse_git_status(output) if is_check_candidate(entry)]


async def run_git(args: Sequence[str], cwd: Path) -> str:
    """Run ``git`` with ``args`` in ``cwd`` and return stdout."""
    try:
        process = await asyncio.create_subprocess_exec(
            "git",
            *args,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise GitError(f"Failed to run git: {exc}") from exc
    stdout, stderr = await process.communicate()
    if process.returncode != 0:
        message = stderr.decode("utf-8", errors="replace").strip()
        raise GitError(f"git {' '.join(args)} failed: {message}")
    return stdout.decode("utf-8", errors="replace")


async def read_changed_files(root: Path, *, runner: GitRunner = run_git) -> list[GitStatusFile]:
    """Return check candidates from ``git status --porcelain`` in ``root``."""
    output = await runner(["status", "--porcelain"], root)
    candidates = filter_candidates(output)
    logger.debug("git status reported %d candidate file(s)", len(candidates))
    return candidates


async def git_diff_for_file(root: Path, path: Path, *, runner: GitRunner = run_git) -> str:
    """Return ``git diff`` for one file, or ``""`` when git cannot produce it."""
    try:
        relative = path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        relative = path.as_posix()
    try:
        return await runner(["diff", "--", relative], root)
    except GitError as exc:
        logger.debug("No diff for %s: %s", relative, exc)
        return ""
