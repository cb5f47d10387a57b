"""
Qwen provider package.

Exports:
- Qwen: adapter for DashScope's OpenAI-compatible endpoint
- QwenProviderSettings: settings accepted by the adapter
- create_qwen: settings -> SDK client factory
"""

from ..config.defaults import KNOWN_QWEN_CHAT_MODEL_IDS
from .client import Qwen, QwenChatModelId
from .settings import QwenProviderSettings, create_qwen

__all__ = [
    "KNOWN_QWEN_CHAT_MODEL_IDS",
    "Qwen",
    "QwenChatModelId",
    "QwenProviderSettings",
    "create_qwen",
]
