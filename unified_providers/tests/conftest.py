"""Pytest configuration for the providers test suite.

Every test runs with provider credentials and config-file pointers removed
from the environment so results never depend on the developer's shell.
"""

from __future__ import annotations

from typing import Iterator

import pytest

_ISOLATED_ENV = (
    "DASHSCOPE_API_KEY",
    "QWEN_API_KEY",
    "QWEN_BASE_URL",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "UNIFIED_PROVIDERS_CONFIG_FILE",
    "UNIFIED_PROVIDERS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear credential and configuration variables for the duration of a test."""

    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def qwen_options() -> dict:
    """Minimal settings accepted by the Qwen adapter."""

    return {"api_key": "test-api-key"}
