"""Qwen provider settings and client factory.

Purpose
-------
Describe the settings accepted by the Qwen adapter and turn them into an
SDK client. Qwen models are served by DashScope's OpenAI-compatible
endpoint, so the client is an ``openai.OpenAI`` instance pointed at that
base URL.

External dependencies
---------------------
- ``openai`` SDK (client construction only; no request is sent here).
- Pydantic v2 for the immutable settings container.

Pass-through contract
---------------------
Field names match the SDK constructor's keyword arguments and unknown keys
are kept (``extra="allow"``). Values are typed ``Any`` and never coerced:
the object the caller supplied (a callable key, an ``openai.Timeout``, a
custom ``http_client``) is the object the SDK receives. Nothing is renamed,
reshaped or validated here.

Failure modes
-------------
- ``TypeError`` from the SDK for keyword arguments it does not know.
- ``openai.OpenAIError`` from the SDK when no API key can be found.
- Whatever the SDK raises for values it rejects.
All propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from openai import OpenAI
from pydantic import BaseModel, ConfigDict

from ..config import get_provider_config
from ..config.defaults import QWEN_PROVIDER_NAME

# Config-sourced fields used to fill gaps left by explicit settings.
_CONFIG_FIELDS = ("api_key", "base_url")


class QwenProviderSettings(BaseModel):
    """Settings for the Qwen adapter.

    Attributes
    ----------
    api_key:
        DashScope API key, or a zero-argument callable returning one. Falls
        back to ``DASHSCOPE_API_KEY`` / ``QWEN_API_KEY`` or the config file
        when omitted.
    base_url:
        Endpoint override, e.g. the international DashScope region. Defaults
        to the compatible-mode endpoint in ``config.defaults``.
    organization, project:
        Forwarded as-is to the SDK.
    timeout:
        Seconds or an ``openai.Timeout``, applied by the SDK.
    max_retries:
        SDK-level retry count.
    default_headers, default_query:
        Static headers / query parameters added to every request.

    Any other keyword (``http_client``, ``websocket_base_url``, ...) is kept
    and forwarded to the SDK constructor.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    api_key: Any = None
    base_url: Any = None
    organization: Any = None
    project: Any = None
    timeout: Any = None
    max_retries: Any = None
    default_headers: Any = None
    default_query: Any = None


QwenSettingsInput = Union[QwenProviderSettings, Mapping[str, Any]]


def coerce_settings(options: Optional[QwenSettingsInput]) -> QwenProviderSettings:
    """Return ``options`` as a :class:`QwenProviderSettings` instance."""
    if options is None:
        return QwenProviderSettings()
    if isinstance(options, QwenProviderSettings):
        return options
    return QwenProviderSettings(**dict(options))


def explicit_settings(options: Optional[QwenSettingsInput]) -> Dict[str, Any]:
    """Return the caller's non-``None`` settings as the original objects.

    Works for mappings and :class:`QwenProviderSettings` alike (iterating a
    pydantic model yields declared fields and extras).
    """
    if options is None:
        return {}
    return {k: v for k, v in dict(options).items() if v is not None}


def client_kwargs(options: Optional[QwenSettingsInput]) -> Dict[str, Any]:
    """Build the SDK constructor kwargs for ``options``.

    Explicit, non-``None`` settings are passed verbatim and win over the base
    URL and API key resolved by :func:`get_provider_config`.
    """
    cfg = get_provider_config(QWEN_PROVIDER_NAME)
    kwargs: Dict[str, Any] = {k: cfg[k] for k in _CONFIG_FIELDS if cfg.get(k)}
    kwargs.update(explicit_settings(options))
    return kwargs


def create_qwen(options: Optional[QwenSettingsInput] = None) -> OpenAI:
    """Create the SDK client for ``options`` without performing network I/O."""
    return OpenAI(**client_kwargs(options))


__all__ = [
    "QwenProviderSettings",
    "QwenSettingsInput",
    "coerce_settings",
    "explicit_settings",
    "client_kwargs",
    "create_qwen",
]
