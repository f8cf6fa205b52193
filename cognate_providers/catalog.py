"""Provider catalog: the ordered list of selectable providers.

The default catalog is built at process start from a static table, with
model and max-token values taken from the configuration layer so that
``OPENAI_MODEL`` or a config file entry changes the default without code
edits. Edits replace entries; a ``ProviderSpec`` is never mutated.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .base.models import ProviderSpec
from .config import get_provider_config
from .config.defaults import DEFAULT_MAX_TOKENS

# id, display name, selected by default
_DEFAULT_ROWS: Tuple[Tuple[str, str, bool], ...] = (
    ("openai", "OpenAI GPT-5", True),
    ("anthropic", "Claude Opus 4.1", True),
    ("google", "Google Gemini", False),
    ("deepseek", "DeepSeek V3.1", False),
)


def default_providers() -> List[ProviderSpec]:
    """Build the default catalog entries, honoring config overrides."""
    specs: List[ProviderSpec] = []
    for provider_id, display, selected in _DEFAULT_ROWS:
        cfg = get_provider_config(provider_id)
        specs.append(
            ProviderSpec(
                id=provider_id,
                display_name=display,
                selected=selected,
                model=str(cfg.get("model") or ""),
                max_tokens=int(cfg.get("max_tokens") or DEFAULT_MAX_TOKENS),
            )
        )
    return specs


class ProviderCatalog:
    """Ordered provider entries with selection and settings edits.

    Every operation on an unknown id is a no-op.
    """

    def __init__(self, providers: Optional[Iterable[ProviderSpec]] = None) -> None:
        self._providers: List[ProviderSpec] = list(providers) if providers is not None else default_providers()

    def providers(self) -> List[ProviderSpec]:
        return list(self._providers)

    def get(self, provider_id: str) -> Optional[ProviderSpec]:
        return next((p for p in self._providers if p.id == provider_id), None)

    def selected(self) -> List[ProviderSpec]:
        return [p for p in self._providers if p.selected]

    def toggle_provider(self, provider_id: str) -> None:
        self._providers = [p.toggled() if p.id == provider_id else p for p in self._providers]

    def update_provider_settings(
        self,
        provider_id: str,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        self._providers = [
            p.with_settings(model=model, max_tokens=max_tokens) if p.id == provider_id else p
            for p in self._providers
        ]

    def replace(self, providers: Iterable[ProviderSpec]) -> None:
        self._providers = list(providers)

    def to_dict(self) -> Dict[str, List[Dict]]:
        return {"providers": [p.to_dict() for p in self._providers]}


__all__ = ["ProviderCatalog", "default_providers"]
