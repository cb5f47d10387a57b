"""Side-effect free helpers shared by provider adapters."""

from .messages import get_messages

__all__ = ["get_messages"]
