"""Shared type aliases for vibechecks."""

from .cache import CacheEntry, CachePayload
from .common import BatchStatus, JsonObject, JsonScalar, JsonValue, RunOn, Scope, Severity

__all__ = [
    "BatchStatus",
    "CacheEntry",
    "CachePayload",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "RunOn",
    "Scope",
    "Severity",
]
