"""Tests for document construction and workspace-relative keys."""

from __future__ import annotations

from pathlib import Path

from vibechecks.checker.documents import language_for_path, open_document, relative_key


def test_language_for_path_maps_known_extensions() -> None:
    assert language_for_path(Path("a.ts")) == "typescript"
    assert language_for_path(Path("A.PY")) == "python"
    assert language_for_path(Path("notes.unknown")) == "plaintext"


def test_open_document_reads_text_and_allows_language_override(tmp_path: Path) -> None:
    path = tmp_path / "a.ts"
    path.write_text("let x = 1;\n", encoding="utf-8")

    document = open_document(path)
    overridden = open_document(path, language_id="javascript")

    assert document.text == "let x = 1;\n"
    assert document.language_id == "typescript"
    assert overridden.language_id == "javascript"


def test_relative_key_is_posix_relative_to_root(tmp_path: Path) -> None:
    assert relative_key(tmp_path / "src" / "a.ts", tmp_path) == "src/a.ts"
    assert relative_key(Path("/elsewhere/a.ts"), tmp_path) == "/elsewhere/a.ts"
    assert relative_key(Path("a.ts"), None) == "a.ts"
