"""Interfaces (Protocols) split into single-class modules."""

from .has_default_model import HasDefaultModel

__all__ = ["HasDefaultModel"]
