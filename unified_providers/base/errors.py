"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``unified_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.internal_error import InternalError

__all__ = ["ErrorCode", "ProviderError", "InternalError"]
