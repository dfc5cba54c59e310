"""Tests for JSON IO and hashing helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from vibechecks.io import load_json_file, text_sha256, write_json_atomic


def test_write_json_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "cache.json"
    temp_prefix = ".tmp-"
    temp_suffix = ".json"

    with pytest.raises(TypeError):
        write_json_atomic(
            path=out_path,
            payload={"bad": object()},
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_json_atomic_creates_parent_directories(tmp_path: Path) -> None:
    out_path = tmp_path / "a" / "b" / "cache.json"

    write_json_atomic(path=out_path, payload={"k": [1, 2]}, temp_prefix=".tmp-", temp_suffix=".json")

    assert load_json_file(out_path) == {"k": [1, 2]}


def test_text_sha256_is_stable_and_content_sensitive() -> None:
    assert text_sha256("const a = 1;\n") == text_sha256("const a = 1;\n")
    assert text_sha256("const a = 1;\n") != text_sha256("const a = 2;\n")
    assert len(text_sha256("")) == 64
