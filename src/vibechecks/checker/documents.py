"""Build editor-style documents from files on disk."""

from __future__ import annotations

from pathlib import Path

from vibechecks.constants.languages import DEFAULT_LANGUAGE_ID, EXTENSION_LANGUAGE_IDS
from vibechecks.model import Document


def language_for_path(path: Path) -> str:
    """Map a file extension to an editor language id."""
    return EXTENSION_LANGUAGE_IDS.get(path.suffix.lower(), DEFAULT_LANGUAGE_ID)


def open_document(path: Path, *, language_id: str | None = None) -> Document:
    """Read ``path`` as UTF-8 and wrap it as a document."""
    return Document(
        path=path,
        text=path.read_text(encoding="utf-8"),
        language_id=language_id or language_for_path(path),
    )


def relative_key(path: Path, root: Path | None) -> str:
    """Return the workspace-relative POSIX path used for cache keys and display."""
    if root is None:
        return path.as_posix()
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()
