"""Message normalization helpers shared across providers.

Callers hand either a single prompt string or a prepared conversation to an
inference call; :func:`get_messages` turns that input into the one ordered
message sequence the client expects. Helpers here are pure: no I/O, no
logging, no provider state.
"""
from __future__ import annotations

from typing import Optional, Sequence

from ..errors import InternalError
from ..models import Message

MISSING_MESSAGES_ERROR = "Either 'prompt' or 'messages' must be provided and non-empty."


def get_messages(
    *,
    prompt: Optional[str] = None,
    messages: Optional[Sequence[Message]] = None,
) -> Sequence[Message]:
    """Return the canonical message sequence for a prompt or conversation.

    Rules (first match wins)
    - A non-empty ``messages`` sequence is returned as is: same object, same
      order, individual messages are not inspected.
    - Otherwise a non-empty ``prompt`` becomes a single ``user`` message.

    ``messages`` takes precedence when both are given; ``prompt`` is then
    ignored rather than merged into the history.

    Parameters
    - prompt: Plain text prompt. An empty string counts as not provided.
    - messages: Ordered conversation turns. An empty sequence counts as not
      provided.

    Returns
    - The caller's ``messages`` or ``[Message(role="user", content=prompt)]``.

    Raises
    - InternalError: Neither a non-empty ``messages`` nor a non-empty
      ``prompt`` was supplied.
    """
    if messages:
        return messages
    if prompt:
        return [Message(role="user", content=prompt)]
    raise InternalError(MISSING_MESSAGES_ERROR)


__all__ = ["MISSING_MESSAGES_ERROR", "get_messages"]
