"""
Providers Base Package

Provider-agnostic contracts shared by every adapter:
- Provider: base abstraction holding settings, client and default model
- Interfaces: structural protocols (HasDefaultModel)
- Models: chat message DTOs
- Errors: normalized error taxonomy
- Factory: lazy creation of adapters by canonical name
- Utils: message normalization
"""

from .errors import ErrorCode, InternalError, ProviderError
from .factory import ProviderFactory, UnknownProviderError, create_provider
from .interfaces import HasDefaultModel
from .models import ChatMessage, ContentPart, ContentPartType, Message, Role
from .provider import ModelId, Provider
from .utils.messages import get_messages

__all__ = [
    # Provider
    "Provider",
    "ModelId",
    # Interfaces
    "HasDefaultModel",
    # Models
    "Role",
    "ContentPartType",
    "ContentPart",
    "Message",
    "ChatMessage",
    # Errors
    "ErrorCode",
    "ProviderError",
    "InternalError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    "create_provider",
    # Utils
    "get_messages",
]
