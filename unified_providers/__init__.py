"""unified_providers package

A uniform ``Provider`` surface over hosted large-language-model services.

Public API (re-exported):
    - Version: ``__version__``
    - Providers: :class:`Provider`, :class:`Qwen`, :class:`QwenProviderSettings`
    - Messages: :func:`get_messages`, :class:`Message` / ``ChatMessage``
    - Exceptions: :class:`ProviderError`, :class:`InternalError`,
      :class:`ErrorCode`, :class:`UnknownProviderError`
    - Factory: :func:`create`

Example::

    from unified_providers import create, get_messages

    qwen = create("qwen", api_key="sk-...")
    messages = get_messages(prompt="Hello")
"""

from typing import Any, Optional

from .base.errors import ErrorCode, InternalError, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import HasDefaultModel
from .base.models import ChatMessage, ContentPart, Message, Role
from .base.provider import ModelId, Provider
from .base.utils.messages import get_messages
from .qwen import KNOWN_QWEN_CHAT_MODEL_IDS, Qwen, QwenChatModelId, QwenProviderSettings, create_qwen

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Providers
    "Provider",
    "ModelId",
    "HasDefaultModel",
    "Qwen",
    "QwenChatModelId",
    "QwenProviderSettings",
    "KNOWN_QWEN_CHAT_MODEL_IDS",
    "create_qwen",
    # Messages
    "Message",
    "ChatMessage",
    "ContentPart",
    "Role",
    "get_messages",
    # Exceptions
    "ErrorCode",
    "ProviderError",
    "InternalError",
    "UnknownProviderError",
    # Factory
    "ProviderFactory",
    "create",
]


def create(provider_name: str, options: Optional[Any] = None, **kwargs: Any) -> Provider:
    """Instantiate a provider adapter by canonical name.

    Parameters
    ----------
    provider_name:
        Canonical provider name (for example, ``"qwen"``).
    options:
        Settings object or mapping for the adapter.
    **kwargs:
        Individual settings merged over ``options``.

    Raises
    ------
    UnknownProviderError
        If no adapter is registered under ``provider_name``.

    Errors raised while the adapter builds its client propagate unchanged.
    """
    return ProviderFactory.create(provider_name, options, **kwargs)
