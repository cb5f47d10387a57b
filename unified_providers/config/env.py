"""unified_providers.config.env
============================

Mapping from provider identifiers to the environment variables holding
their credentials, plus small lookup helpers.

Design Notes
------------
- ``ENV_MAP`` holds the canonical variable per provider. Providers known
  under several names list them in ``ENV_ALIASES`` with the canonical name
  first to establish precedence.
- Helpers never raise on unknown providers or unset variables; callers
  decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "qwen": "DASHSCOPE_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "qwen": ("DASHSCOPE_API_KEY", "QWEN_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder/test token.

    Heuristics (case-insensitive, surrounding spaces ignored): contains
    'placeholder', 'changeme' or 'example', or starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider, or None."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a provider.

    The canonical name is yielded first, followed by any aliases.
    """
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first candidate holding a real
        (non-placeholder) value; ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
