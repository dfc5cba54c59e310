"""Instruction document loading."""

from .resolver import load_instructions, read_language_instructions, resolve_instructions

__all__ = ["load_instructions", "read_language_instructions", "resolve_instructions"]
