"""Resolve the instruction text for a check from markdown rule documents.

Documents are ``*.md`` files in the instructions folder, read in filename
order. A missing folder is created and reported as "no instructions"
(``None``) so the caller can skip the check and ask for rules to be added.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vibechecks.constants.instructions import (
    INSTRUCTION_FILE_SUFFIX,
    SECTION_HEADING_PATTERN,
    SECTION_SPLIT_PATTERN,
)
from vibechecks.exceptions import InstructionsError

logger = logging.getLogger(__name__)


def resolve_instructions(folder: Path, language_id: str | None = None) -> str | None:
    """Return instructions for ``language_id``, or every document when no language is given."""
    if language_id:
        return read_language_instructions(folder, language_id)
    return load_instructions(folder)


def load_instructions(folder: Path) -> str | None:
    """Concatenate every instruction document verbatim."""
    documents = _read_documents(folder)
    joined = "\n".join(content for _, content in documents)
    return joined if joined.strip() else None


def read_language_instructions(folder: Path, language_id: str) -> str | None:
    """Return the ``## `` sections whose heading names ``language_id``.

    A document without any matching heading contributes its whole content to
    the general set, which is used only when no document matched at all.
    """
    documents = _read_documents(folder)
    if not documents:
        return None

    lang = language_id.lower()
    relevant: list[str] = []
    general: list[str] = []
    for filename, content in documents:
        sections = language_sections(content, lang)
        if sections:
            relevant.extend(sections)
        else:
            general.append(f"\n# {filename}\n{content}\n")

    resolved = "".join(relevant).strip()
    if resolved:
        logger.debug("Using %d %s-specific instruction section(s)", len(relevant), lang)
        return resolved
    return "".join(general).strip() or None


def language_sections(content: str, lang: str) -> list[str]:
    """Return ``heading + body`` chunks of ``content`` whose heading contains ``lang``."""
    if not lang:
        return []
    parts = SECTION_SPLIT_PATTERN.split(content)
    matched: list[str] = []
    for index, part in enumerate(parts):
        if not SECTION_HEADING_PATTERN.match(part):
            continue
        if lang in part.lower():
            body = parts[index + 1] if index + 1 < len(parts) else ""
            matched.append(f"\n{part}\n{body}")
    return matched


def _read_documents(folder: Path) -> list[tuple[str, str]]:
    try:
        folder.mkdir(parents=True, exist_ok=True)
        paths = sorted(
            (path for path in folder.iterdir() if path.is_file() and path.name.endswith(INSTRUCTION_FILE_SUFFIX)),
            key=lambda path: path.name,
        )
        return [(path.name, path.read_text(encoding="utf-8")) for path in paths]
    except (OSError, UnicodeDecodeError) as exc:
        raise InstructionsError(f"Failed to read instructions from {folder}: {exc}") from exc
