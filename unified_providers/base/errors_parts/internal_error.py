"""
Caller-contract violation error.

`InternalError` marks failures that originate inside this library because a
caller broke an input contract (for example, asking for a message sequence
without supplying any content). It is never retryable and is distinct from
errors raised by the underlying client SDKs, which propagate untouched.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class InternalError(ProviderError):
    """Raised when library input contracts are violated by the caller."""

    def __init__(self, message: str, *, provider: str = "internal", model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL,
            message=message,
            provider=provider,
            model=model,
            retryable=False,
        )


__all__ = ["InternalError"]
