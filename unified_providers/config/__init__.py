"""Unified configuration layer for providers.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by
       ``UNIFIED_PROVIDERS_CONFIG_FILE``
    3. Environment ``<PROVIDER>_BASE_URL``
    4. API key from the credential variables in ``config.env`` (only when
       still unset)
    5. In-code overrides passed to :func:`get_provider_config`

External Config File
--------------------
JSON is tried first, then YAML. Structure example::

    qwen:
      base_url: https://dashscope-intl.aliyuncs.com/compatible-mode/v1
      api_key: sk-...

Configuration never carries a model id: each provider type fixes its own
default model.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import QWEN_DEFAULT_BASE_URL, QWEN_PROVIDER_NAME
from .env import resolve_provider_key

CONFIG_FILE_ENV = "UNIFIED_PROVIDERS_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    QWEN_PROVIDER_NAME: {"base_url": QWEN_DEFAULT_BASE_URL},
}

ENV_FIELD_MAP = {
    "base_url": "BASE_URL",
}


def _load_external_config() -> Dict[str, Any]:
    """Read the optional config file; missing or unparsable files yield ``{}``."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return {}
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    return data if isinstance(data, dict) else {}


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external file -> env vars ->
    credential env (if no key yet) -> overrides. Unknown providers yield only
    what the file, environment and overrides supply.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if not cfg.get("api_key"):
        key, _ = resolve_provider_key(name)
        if key:
            cfg["api_key"] = key

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = ["CONFIG_FILE_ENV", "DEFAULTS", "get_provider_config"]
