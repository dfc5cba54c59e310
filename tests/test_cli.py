"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vibechecks.cli.main import build_parser, main

FAILING_RESPONSE = '{"passed": false, "errors": [{"line": 2, "message": "no tabs"}], "warnings": []}'


def _workspace(tmp_path: Path) -> Path:
    rules = tmp_path / ".vibe-checks"
    rules.mkdir()
    (rules / "rules.md").write_text("Do not use tabs.\n", encoding="utf-8")
    return tmp_path


def _mock_oracle(response: str) -> MagicMock:
    oracle_cls = MagicMock()
    oracle_cls.return_value.invoke = AsyncMock(return_value=response)
    oracle_cls.return_value.close = AsyncMock()
    return oracle_cls


def test_build_parser_accepts_check_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "check",
            "a.ts",
            "b.ts",
            "--root",
            str(tmp_path),
            "--model",
            "llama3.1:8b",
            "--scope",
            "changed_lines",
            "--sarif",
            str(tmp_path / "out.sarif"),
            "--no-cache",
        ]
    )

    assert args.command == "check"
    assert args.files == [Path("a.ts"), Path("b.ts")]
    assert args.root == tmp_path
    assert args.model == "llama3.1:8b"
    assert args.scope == "changed_lines"
    assert args.sarif == tmp_path / "out.sarif"
    assert args.no_cache is True


def test_build_parser_rejects_unknown_scope() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["check", "a.ts", "--scope", "everything"])


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_missing_root_is_config_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["clear-cache", "--root", str(tmp_path / "missing")])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_invalid_config_is_config_error(tmp_path: Path) -> None:
    (tmp_path / "vibechecks.yaml").write_text("scope: nope\n", encoding="utf-8")

    assert main(["clear-cache", "--root", str(tmp_path)]) == 2


def test_main_clear_cache_deletes_artifact(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cache_file = tmp_path / ".vibe-checks-cache" / "vibe-checks-cache.json"
    cache_file.parent.mkdir()
    cache_file.write_text('{"version": 2, "entries": {}}', encoding="utf-8")

    exit_code = main(["clear-cache", "--root", str(tmp_path)])

    assert exit_code == 0
    assert not cache_file.exists()
    assert "Vibe Checks cache cleared." in capsys.readouterr().out


def test_main_check_without_model_fails_verdict(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _workspace(tmp_path)
    target = root / "a.ts"
    target.write_text("const a = 1;\n", encoding="utf-8")

    exit_code = main(["check", str(target), "--root", str(root)])

    assert exit_code == 1
    assert "No language model configured" in capsys.readouterr().out


def test_main_check_without_instructions_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "a.ts"
    target.write_text("x\n", encoding="utf-8")

    exit_code = main(["check", str(target), "--root", str(tmp_path), "-m", "m"])

    assert exit_code == 2
    assert "Add instructions" in capsys.readouterr().out


def test_main_check_writes_sarif(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _workspace(tmp_path)
    target = root / "a.ts"
    target.write_text("a\n\tb\n", encoding="utf-8")
    sarif_path = root / "out.sarif"
    oracle_cls = _mock_oracle(FAILING_RESPONSE)

    with patch("vibechecks.cli.handlers.OllamaOracle", oracle_cls):
        exit_code = main(["check", str(target), "--root", str(root), "-m", "m", "--sarif", str(sarif_path)])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "FAIL" in out
    assert "1. a.ts:2 no tabs" in out
    assert "Vibe check failed with 1 errors in a.ts" in out
    [result] = json.loads(sarif_path.read_text(encoding="utf-8"))["runs"][0]["results"]
    assert result["locations"][0]["physicalLocation"]["region"]["startLine"] == 2
    oracle_cls.return_value.close.assert_awaited_once()


def test_main_check_no_cache_leaves_no_artifact(tmp_path: Path) -> None:
    root = _workspace(tmp_path)
    target = root / "a.ts"
    target.write_text("x\n", encoding="utf-8")

    with patch("vibechecks.cli.handlers.OllamaOracle", _mock_oracle('{"passed": true}')):
        exit_code = main(["check", str(target), "--root", str(root), "-m", "m", "--no-cache"])

    assert exit_code == 0
    assert not (root / ".vibe-checks-cache").exists()


def test_main_check_unreadable_file_exits_2(tmp_path: Path) -> None:
    root = _workspace(tmp_path)

    with patch("vibechecks.cli.handlers.OllamaOracle", _mock_oracle('{"passed": true}')):
        exit_code = main(["check", str(root / "missing.ts"), "--root", str(root), "-m", "m"])

    assert exit_code == 2


def test_watch_help_describes_every_trigger(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["watch", "--help"])

    out = " ".join(capsys.readouterr().out.split())
    assert "on_change writes are debounced per file" in out
    assert "on_save and on_command check on every detected write" in out
