"""Qwen provider adapter.

Binds the provider base abstraction to DashScope's OpenAI-compatible client.
Settings are forwarded unchanged to :func:`create_qwen`; the adapter adds
only the provider name and its default model.
"""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from ..base.provider import ModelId, Provider
from ..config.defaults import QWEN_DEFAULT_MODEL, QWEN_PROVIDER_NAME
from .settings import QwenProviderSettings, QwenSettingsInput, create_qwen

# Any string is a valid model id; see KNOWN_QWEN_CHAT_MODEL_IDS for the
# documented ones.
QwenChatModelId = ModelId


class Qwen(Provider[OpenAI, QwenSettingsInput]):
    """Qwen provider backed by the ``openai`` SDK.

    Example::

        qwen = Qwen({"api_key": "sk-..."})
        messages = get_messages(prompt="Hello")
        qwen.client.chat.completions.create(
            model=qwen.resolve_model_id(),
            messages=[m.to_dict() for m in messages],
        )
    """

    def __init__(self, options: Optional[QwenSettingsInput] = None) -> None:
        """Initialize the adapter.

        Args:
            options: A :class:`QwenProviderSettings` or a plain mapping of the
                same keys. Kept verbatim as ``self.options``; ``None`` means
                empty settings (credentials then come from the environment).
        """
        super().__init__(QwenProviderSettings() if options is None else options)

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return QWEN_PROVIDER_NAME

    def _create_client(self, options: QwenSettingsInput) -> OpenAI:
        return create_qwen(options)

    def default_language_model_id(self) -> QwenChatModelId:
        """Return ``"qwen-max"``, the general-purpose flagship model."""
        return QWEN_DEFAULT_MODEL


__all__ = ["Qwen", "QwenChatModelId"]
