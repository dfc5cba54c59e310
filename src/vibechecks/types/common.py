"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["error", "warning"]
Scope: TypeAlias = Literal["whole_file", "changed_lines"]
RunOn: TypeAlias = Literal["on_command", "on_save", "on_change", "on_open"]
BatchStatus: TypeAlias = Literal["passed", "warnings", "failed"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
