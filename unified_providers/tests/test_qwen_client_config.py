"""Tests for Qwen client construction and error propagation."""

from __future__ import annotations

import json
import socket

import httpx
import openai
import pytest
from pydantic import ValidationError

from unified_providers import Qwen, QwenProviderSettings, create_qwen
from unified_providers.config.defaults import QWEN_DEFAULT_BASE_URL
from unified_providers.qwen.settings import client_kwargs, coerce_settings


def _url(client: openai.OpenAI) -> str:
    return str(client.base_url).rstrip("/")


def test_client_targets_dashscope_by_default(qwen_options):
    provider = Qwen(qwen_options)
    assert isinstance(provider.client, openai.OpenAI)
    assert provider.client.api_key == "test-api-key"
    assert _url(provider.client) == QWEN_DEFAULT_BASE_URL


def test_explicit_base_url_wins_over_environment(monkeypatch):
    monkeypatch.setenv("QWEN_BASE_URL", "https://env.example.invalid/v1")
    provider = Qwen({"api_key": "k", "base_url": "https://explicit.example.invalid/v1"})
    assert _url(provider.client) == "https://explicit.example.invalid/v1"


def test_environment_base_url_overrides_default(monkeypatch):
    monkeypatch.setenv("QWEN_BASE_URL", "https://dashscope-intl.aliyuncs.com/compatible-mode/v1")
    provider = Qwen({"api_key": "k"})
    assert _url(provider.client) == "https://dashscope-intl.aliyuncs.com/compatible-mode/v1"


def test_api_key_resolved_from_alias(monkeypatch):
    monkeypatch.setenv("QWEN_API_KEY", "sk-alias")
    provider = Qwen({})
    assert provider.client.api_key == "sk-alias"


def test_api_key_from_config_file(monkeypatch, tmp_path):
    cfg = tmp_path / "providers.json"
    cfg.write_text(json.dumps({"qwen": {"api_key": "sk-file"}}), encoding="utf-8")
    monkeypatch.setenv("UNIFIED_PROVIDERS_CONFIG_FILE", str(cfg))
    provider = Qwen({})
    assert provider.client.api_key == "sk-file"


def test_extra_settings_pass_through_to_sdk():
    provider = Qwen({"api_key": "k", "max_retries": 0, "default_headers": {"X-Trace": "abc"}})
    assert provider.client.max_retries == 0
    assert provider.client.default_headers["X-Trace"] == "abc"


def test_client_kwargs_passes_explicit_fields_verbatim():
    kwargs = client_kwargs({"api_key": "k", "timeout": 12.5, "websocket_base_url": None})
    assert kwargs["api_key"] == "k"
    assert kwargs["timeout"] == 12.5
    assert kwargs["base_url"] == QWEN_DEFAULT_BASE_URL
    # None values are dropped rather than overriding SDK defaults.
    assert "websocket_base_url" not in kwargs


def test_coerce_settings_keeps_unknown_keys():
    settings = coerce_settings({"api_key": "k", "future_option": 1})
    assert settings.model_dump(exclude_none=True) == {"api_key": "k", "future_option": 1}
    assert coerce_settings(None) == QwenProviderSettings()


def test_settings_are_immutable():
    settings = QwenProviderSettings(api_key="k")
    with pytest.raises(ValidationError):
        settings.api_key = "other"  # type: ignore[misc]


def test_values_are_not_coerced():
    kwargs = client_kwargs({"api_key": "k", "max_retries": "3", "timeout": 5})
    assert kwargs["max_retries"] == "3"
    assert kwargs["timeout"] == 5 and isinstance(kwargs["timeout"], int)


def test_timeout_object_reaches_sdk_unchanged():
    timeout = openai.Timeout(5.0, connect=2.0)
    provider = Qwen({"api_key": "k", "timeout": timeout})
    assert provider.client.timeout is timeout


def test_callable_api_key_reaches_sdk_unchanged():
    def rotating_key() -> str:
        return "sk-rotating"

    assert client_kwargs({"api_key": rotating_key})["api_key"] is rotating_key
    provider = Qwen({"api_key": rotating_key})
    assert provider.options["api_key"] is rotating_key


def test_settings_model_values_keep_identity():
    timeout = openai.Timeout(3.0)
    settings = QwenProviderSettings(api_key="k", timeout=timeout, default_headers={"X-Trace": "1"})
    kwargs = client_kwargs(settings)
    assert kwargs["timeout"] is timeout
    assert kwargs["default_headers"] is settings.default_headers


def test_construction_sends_no_requests():
    requests: list = []

    def refuse(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        raise AssertionError(f"unexpected request to {request.url}")

    http_client = openai.DefaultHttpxClient(transport=httpx.MockTransport(refuse))
    provider = Qwen({"api_key": "k", "http_client": http_client})
    assert provider.options["http_client"] is http_client
    assert requests == []
    http_client.close()


def test_construction_opens_no_sockets(monkeypatch):
    def refuse_connect(*args, **kwargs):
        raise AssertionError("socket connect during construction")

    monkeypatch.setattr(socket.socket, "connect", refuse_connect)
    monkeypatch.setattr(socket, "create_connection", refuse_connect)
    provider = Qwen({"api_key": "k"})
    assert provider.client.api_key == "k"


def test_unknown_sdk_option_propagates_type_error():
    with pytest.raises(TypeError):
        Qwen({"api_key": "k", "not_an_sdk_option": True})


def test_missing_credentials_propagate_sdk_error():
    with pytest.raises(openai.OpenAIError):
        Qwen({})


def test_placeholder_env_key_is_ignored(monkeypatch):
    monkeypatch.setenv("DASHSCOPE_API_KEY", "placeholder")
    with pytest.raises(openai.OpenAIError):
        create_qwen()
