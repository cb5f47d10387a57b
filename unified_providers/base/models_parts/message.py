"""
Message DTO used across providers.

Defines the `Message` dataclass (exported as `ChatMessage` too) and the
`Role` literal. Content may be plain text or a list of `ContentPart` objects
for providers that accept structured messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

from .content_part import ContentPart


Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class Message:
    """One turn of a conversation.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"``,
            ``"assistant"``, or ``"tool"``).
        content: Either a plain text string or a list of `ContentPart` items.
    """

    role: Role
    content: Union[str, List[ContentPart]]

    def is_structured(self) -> bool:
        """Return True if the message content is a structured list of parts."""
        return isinstance(self.content, list)

    def text_or_joined(self) -> str:
        """Return a flattened string view of the content.

        Text parts are joined with newlines; non-text parts become bracketed
        type tokens such as ``[image]``.
        """
        if isinstance(self.content, str):
            return self.content
        return "\n".join(p.text if p.text else f"[{p.type}]" for p in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{"role", "content"}`` mapping chat completion SDKs accept."""
        if isinstance(self.content, str):
            return {"role": self.role, "content": self.content}
        return {"role": self.role, "content": [p.to_dict() for p in self.content]}


ChatMessage = Message


__all__ = [
    "ChatMessage",
    "Message",
    "Role",
]
