"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `unified_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .internal_error import InternalError

__all__ = ["ErrorCode", "ProviderError", "InternalError"]
