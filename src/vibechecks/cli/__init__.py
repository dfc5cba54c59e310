"""Command-line interface for vibechecks."""
