"""
ProviderSpec DTO: one entry of the provider catalog.

Instances are immutable; catalog edits produce a new instance through
``with_settings`` / ``toggled`` rather than mutating in place.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProviderSpec:
    """A selectable provider with its generation settings.

    Attributes:
        id: Stable provider key (``"openai"``, ``"anthropic"``, ...).
        display_name: Human-facing label.
        selected: Whether the provider takes part in the next dispatch round.
        model: Model identifier; empty means "use the adapter default".
        max_tokens: Output token budget passed to the provider.
    """

    id: str
    display_name: str
    selected: bool
    model: str
    max_tokens: int

    def toggled(self) -> "ProviderSpec":
        return replace(self, selected=not self.selected)

    def with_settings(self, model: Optional[str] = None, max_tokens: Optional[int] = None) -> "ProviderSpec":
        changes: Dict[str, Any] = {}
        if model is not None:
            changes["model"] = model
        if max_tokens is not None:
            changes["max_tokens"] = int(max_tokens)
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ProviderSpec"]
