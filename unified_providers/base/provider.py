"""Provider base abstraction.

Purpose
-------
Bind a hosted-model client library to the uniform provider contract shared
by every adapter in this package:

- ``options``: the settings object the adapter was constructed with, kept
  verbatim for introspection.
- ``client``: the SDK client handle built once from those settings.
- ``default_language_model_id()``: the model used when the caller names
  none; constant for a given adapter type.

External dependencies
---------------------
None here. Concrete adapters supply ``_create_client`` and import their SDK.

Failure modes
-------------
No validation happens at this layer. Whatever ``_create_client`` raises
(bad settings, missing credentials) propagates with its original type; the
adapter adds nothing to the SDK's diagnostics. Construction performs no
network I/O.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from .logging import LogContext, get_logger, log_event

ClientT = TypeVar("ClientT")
SettingsT = TypeVar("SettingsT")

# Model identifiers are open strings; adapters may publish known values for
# discovery but never validate against them.
ModelId = str


class Provider(ABC, Generic[ClientT, SettingsT]):
    """Abstract base for provider adapters.

    Subclasses must implement:
    - ``provider_name``: canonical provider identifier.
    - ``_create_client(options)``: build the SDK client from the settings.
    - ``default_language_model_id()``: return the adapter's default model.
    """

    def __init__(self, options: SettingsT) -> None:
        """Store ``options`` and build the client handle from them.

        Parameters:
            options: Adapter settings, stored as passed (no copy).
        """
        self._options = options
        self._client = self._create_client(options)
        self._logger = get_logger(f"unified_providers.{self.provider_name}")
        log_event(
            self._logger,
            "provider.init",
            LogContext(provider=self.provider_name, model=self.default_language_model_id()),
            client=type(self._client).__name__,
        )

    # ----- Abstract surface -----
    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the canonical provider name (e.g., ``"qwen"``)."""

    @abstractmethod
    def _create_client(self, options: SettingsT) -> ClientT:
        """Create and return the underlying SDK client for ``options``."""

    @abstractmethod
    def default_language_model_id(self) -> ModelId:
        """Return the model identifier used when the caller specifies none."""

    # ----- Accessors -----
    @property
    def options(self) -> SettingsT:
        """The settings object this provider was constructed with."""
        return self._options

    @property
    def client(self) -> ClientT:
        """The SDK client built from ``options``."""
        return self._client

    def default_model(self) -> Optional[str]:
        """Return the default model; makes every provider a ``HasDefaultModel``."""
        return self.default_language_model_id()

    def resolve_model_id(self, model_id: Optional[ModelId] = None) -> ModelId:
        """Return ``model_id`` when it is non-blank, else the default model.

        Any non-empty string is accepted; unknown identifiers are left for the
        service to reject at inference time.
        """
        chosen = (model_id or "").strip()
        return chosen or self.default_language_model_id()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.provider_name!r}, default_model={self.default_language_model_id()!r})"


__all__ = ["ClientT", "ModelId", "Provider", "SettingsT"]
