"""
Provider-agnostic DTOs.

Re-exports the message models split under ``models_parts`` so callers can
import them from a stable location.
"""

from __future__ import annotations

from .models_parts import ChatMessage, ContentPart, ContentPartType, Message, Role

__all__ = [
    "ChatMessage",
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
]
