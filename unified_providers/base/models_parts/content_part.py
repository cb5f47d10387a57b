"""
Structured content part model for chat messages.

Defines the `ContentPart` dataclass and its `ContentPartType` literal. Chat
messages may carry multi-part content (text, images, tool-call metadata);
this object captures a provider-agnostic shape for those parts.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal[
    "text",
    "image",
    "tool_call",
    "tool_result",
    "other",
]


@dataclass
class ContentPart:
    """A single piece of structured message content.

    Attributes:
        type: The semantic kind of the part, e.g. ``"text"`` or ``"image"``.
        text: Optional textual content for human-readable parts.
        data: Optional adapter-specific payload for non-text parts
            (e.g. an image URL descriptor or tool call arguments).
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the object."""
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
