from __future__ import annotations

from unified_providers.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    assert ENV_MAP["qwen"] == "DASHSCOPE_API_KEY"


def test_get_env_var_name_and_aliases():
    assert get_env_var_name("Qwen") == "DASHSCOPE_API_KEY"
    assert get_env_var_name("") is None
    assert get_env_var_name("nope") is None
    assert ENV_ALIASES["qwen"][0] == "DASHSCOPE_API_KEY"
    assert list(get_env_var_candidates("qwen")) == ["DASHSCOPE_API_KEY", "QWEN_API_KEY"]


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("real-value")
    assert not is_placeholder(None)


def test_resolve_provider_key_prefers_canonical(monkeypatch):
    monkeypatch.setenv("DASHSCOPE_API_KEY", "canon")
    monkeypatch.setenv("QWEN_API_KEY", "alias")
    assert resolve_provider_key("qwen") == ("canon", "DASHSCOPE_API_KEY")


def test_resolve_provider_key_skips_placeholders(monkeypatch):
    monkeypatch.setenv("DASHSCOPE_API_KEY", "changeme")
    monkeypatch.setenv("QWEN_API_KEY", "alias")
    assert resolve_provider_key("qwen") == ("alias", "QWEN_API_KEY")


def test_resolve_provider_key_unset_or_unknown():
    assert resolve_provider_key("qwen") == (None, None)
    assert resolve_provider_key("nope") == (None, None)
