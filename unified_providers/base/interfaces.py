"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the Protocols defined under
``unified_providers.base.interfaces_parts`` to keep imports stable.
"""

from __future__ import annotations

from .interfaces_parts import HasDefaultModel

__all__ = ["HasDefaultModel"]
