"""Provider Factory utilities.

Purpose
-------
Create provider adapters by canonical name. Adapter modules are imported
lazily with ``importlib`` so that importing the factory never pulls in an
SDK the caller does not use.

Failure semantics
-----------------
- Lookup problems (unknown name, import failure, missing class) raise
  :class:`UnknownProviderError`.
- Errors raised by the adapter constructor itself (invalid settings,
  missing credentials) propagate unchanged; the factory has nothing to add
  to the SDK's diagnostics.
- No retries or fallbacks.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from .logging import LogContext, get_logger, log_event


class UnknownProviderError(Exception):
    """Raised when a provider name cannot be resolved to an adapter class.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    """


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"qwen"``)."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "qwen": {"module": "unified_providers.qwen.client", "class": "Qwen"},
    }

    @classmethod
    def create(cls, provider: str, options: Optional[Any] = None, **kwargs: Any) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name, case-insensitive (e.g., ``"qwen"``).
        options:
            Settings object or mapping handed to the adapter constructor.
        **kwargs:
            Individual settings; merged over ``options`` with kwargs winning.

        Returns
        -------
        Any
            The constructed adapter.

        Raises
        ------
        UnknownProviderError
            If the provider is unknown, its module fails to import, or the
            adapter class is missing.
        """
        name = (provider or "").lower().strip()
        klass = cls._resolve(name, provider)
        settings = cls._coerce_options(options, kwargs)
        log_event(get_logger("unified_providers.factory"), "factory.create", LogContext(provider=name), adapter=klass.__name__)
        return klass(settings)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in registration order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def _resolve(cls, name: str, requested: str) -> Type:
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{requested}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{requested}': {exc}"
            ) from exc

        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{requested}'"
            ) from exc

    @staticmethod
    def _coerce_options(options: Optional[Any], kwargs: Mapping[str, Any]) -> Optional[Any]:
        """Merge keyword settings over ``options``.

        Contract
        --------
        - Without kwargs, ``options`` is returned untouched (same object).
        - Settings models and mappings are flattened to their non-``None``
          items; values keep their identity.
        - Values in ``kwargs`` take precedence.
        """
        if not kwargs:
            return options
        if options is None:
            return dict(kwargs)
        merged: Dict[str, Any] = {k: v for k, v in dict(options).items() if v is not None}
        merged.update(kwargs)
        return merged


def create_provider(provider: str, options: Optional[Any] = None, **kwargs: Any) -> Any:
    """Shorthand for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, options, **kwargs)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
