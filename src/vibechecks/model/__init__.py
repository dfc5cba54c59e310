"""Core data models for vibechecks."""

from .entities import (
    BatchSummary,
    CheckResult,
    Diagnostic,
    Document,
    GitStatusFile,
    LintEntry,
    LintMessage,
)

__all__ = [
    "BatchSummary",
    "CheckResult",
    "Diagnostic",
    "Document",
    "GitStatusFile",
    "LintEntry",
    "LintMessage",
]
