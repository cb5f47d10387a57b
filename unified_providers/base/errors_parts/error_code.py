"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used by provider adapters and the
message helpers. Values are lowercase snake_case and are considered a stable
public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
