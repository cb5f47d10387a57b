from __future__ import annotations

import openai
import pytest

import unified_providers
from unified_providers import Qwen, QwenProviderSettings
from unified_providers.base.factory import ProviderFactory, UnknownProviderError, create_provider


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nope")


def test_factory_import_failure(monkeypatch):
    # Register a bogus provider to hit the import error path
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"bogus": {"module": "does.not.exist", "class": "X"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("bogus")


def test_factory_missing_class(monkeypatch):
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"bogus": {"module": "unified_providers.qwen.client", "class": "Missing"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError, match="Missing"):
        ProviderFactory.create("bogus")


def test_factory_supported_names():
    assert ProviderFactory.supported() == ("qwen",)


def test_factory_creates_qwen_with_options_verbatim():
    options = {"api_key": "k"}
    provider = ProviderFactory.create(" QWEN ", options)
    assert isinstance(provider, Qwen)
    assert provider.options is options


def test_factory_merges_kwargs_over_options():
    provider = create_provider("qwen", {"api_key": "a", "max_retries": 1}, api_key="b")
    assert provider.options == {"api_key": "b", "max_retries": 1}
    assert provider.client.api_key == "b"


def test_coerce_options_flattens_settings_models():
    merged = ProviderFactory._coerce_options(QwenProviderSettings(api_key="a"), {"max_retries": 2})
    assert merged == {"api_key": "a", "max_retries": 2}


def test_coerce_options_keeps_value_identity():
    timeout = openai.Timeout(4.0)
    merged = ProviderFactory._coerce_options(QwenProviderSettings(api_key="a", timeout=timeout), {"max_retries": "2"})
    assert merged["timeout"] is timeout
    assert merged["max_retries"] == "2"


def test_coerce_options_without_kwargs_returns_same_object():
    options = QwenProviderSettings(api_key="a")
    assert ProviderFactory._coerce_options(options, {}) is options


def test_constructor_errors_propagate_unchanged():
    with pytest.raises(TypeError):
        ProviderFactory.create("qwen", {"api_key": "k", "not_an_sdk_option": True})
    with pytest.raises(openai.OpenAIError):
        ProviderFactory.create("qwen")


def test_top_level_create_delegates_to_factory():
    provider = unified_providers.create("qwen", api_key="k")
    assert isinstance(provider, Qwen)
    assert provider.default_language_model_id() == "qwen-max"
