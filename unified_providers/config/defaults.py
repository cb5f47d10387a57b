"""unified_providers.config.defaults
=================================

Central place for the small, stable default values used by the provider
adapters. Only plain constants live here (no I/O, no imports from provider
packages) so any layer can import them without cycles.
"""

from __future__ import annotations

from typing import Tuple

# ---- Qwen (DashScope, OpenAI-compatible endpoint) ----
QWEN_PROVIDER_NAME = "qwen"
QWEN_DEFAULT_MODEL = "qwen-max"
QWEN_DEFAULT_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"

# Documented chat model identifiers. Used for discovery and autocompletion
# only; any other string is accepted as a model id.
KNOWN_QWEN_CHAT_MODEL_IDS: Tuple[str, ...] = (
    "qwen2.5-14b-instruct-1m",
    "qwen2.5-72b-instruct",
    "qwen2.5-32b-instruct",
    "qwen2.5-14b-instruct",
    "qwen2.5-7b-instruct",
    "qwen2-57b-a14b-instruct",
    "qwen2.5-7b-instruct-1m",
    "qwen-max",
    "qwen-max-latest",
    "qwen-max-2025-01-25",
    "qwen-plus",
    "qwen-plus-latest",
    "qwen-plus-2025-01-25",
    "qwen-turbo",
    "qwen-turbo-latest",
    "qwen-turbo-2024-11-01",
    "qwen-vl-max",
    "qwen-vl-plus",
    "qwen2.5-vl-72b-instruct",
    "qwen2.5-vl-7b-instruct",
    "qwen2.5-vl-3b-instruct",
)


__all__ = [
    "QWEN_PROVIDER_NAME",
    "QWEN_DEFAULT_MODEL",
    "QWEN_DEFAULT_BASE_URL",
    "KNOWN_QWEN_CHAT_MODEL_IDS",
]
