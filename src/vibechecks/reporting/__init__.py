"""Rendering of verdicts: editor diagnostics, terminal log, SARIF export."""
