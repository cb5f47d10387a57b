"""HasDefaultModel Protocol (single-class module).

Structural contract for providers that can name a model when the caller
does not choose one.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Interface for providers that have a default model."""

    def default_model(self) -> Optional[str]:  # pragma: no cover - trivial
        """Return the default model identifier for the provider, if available."""
        return None
