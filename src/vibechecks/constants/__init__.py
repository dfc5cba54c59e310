"""Shared constants for vibechecks."""
