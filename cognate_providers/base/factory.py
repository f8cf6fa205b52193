"""Provider Factory utilities.

Purpose
-------
Map canonical provider ids to adapter classes. Adapters are imported lazily
using ``importlib`` so that importing the dispatcher does not pull in every
vendor SDK up front.

Scope
-----
Built-in providers: ``openai``, ``anthropic``, ``google`` and ``deepseek``.
``register`` adds (or replaces) an entry at runtime, which tests use to plug
in fakes.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type, Union


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider id is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor raised an exception during initialization.
    """


_Entry = Union[Tuple[str, str], Type[Any]]


class ProviderFactory:
    """Create provider adapters based on a canonical id (e.g., ``"openai"``)."""

    _PROVIDERS: Dict[str, _Entry] = {
        "openai": ("cognate_providers.openai.client", "OpenAIAdapter"),
        "anthropic": ("cognate_providers.anthropic.client", "AnthropicAdapter"),
        "google": ("cognate_providers.gemini.client", "GeminiAdapter"),
        "deepseek": ("cognate_providers.deepseek.client", "DeepSeekAdapter"),
    }

    @classmethod
    def create(cls, provider: str) -> Any:
        """Create an adapter instance for ``provider``.

        Raises
        ------
        UnknownProviderError
            If the id is unknown, the adapter module fails to import, the
            adapter class is missing, or the adapter constructor raises.
        """
        name = (provider or "").lower().strip()
        entry = cls._PROVIDERS.get(name)
        if entry is None:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        if isinstance(entry, tuple):
            module_path, class_name = entry
            try:
                mod = import_module(module_path)
            except ImportError as exc:
                raise UnknownProviderError(
                    f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
                ) from exc
            try:
                klass = getattr(mod, class_name)
            except AttributeError as exc:
                raise UnknownProviderError(
                    f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
                ) from exc
        else:
            klass = entry

        try:
            return klass()
        except Exception as exc:
            raise UnknownProviderError(f"Failed to initialize provider '{provider}': {exc}") from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the registered provider ids in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def is_supported(cls, provider: str) -> bool:
        return (provider or "").lower().strip() in cls._PROVIDERS

    @classmethod
    def register(cls, provider: str, adapter: _Entry) -> None:
        """Register an adapter class (or ``(module, class)`` pair) for ``provider``.

        The mapping is copied on first write so subclasses never mutate the
        built-in table of their parent.
        """
        if "_PROVIDERS" not in cls.__dict__:
            cls._PROVIDERS = dict(cls._PROVIDERS)
        cls._PROVIDERS[(provider or "").lower().strip()] = adapter


__all__ = ["ProviderFactory", "UnknownProviderError"]
