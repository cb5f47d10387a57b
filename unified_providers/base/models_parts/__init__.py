"""Single-class modules for provider-agnostic DTOs."""

from .content_part import ContentPart, ContentPartType
from .message import ChatMessage, Message, Role

__all__ = ["ChatMessage", "ContentPart", "ContentPartType", "Message", "Role"]
