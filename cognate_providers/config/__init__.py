"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs, token budgets).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by COGNATE_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_MODEL, DEEPSEEK_BASE_URL)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Credentials are deliberately absent from this layer; they are resolved by
``cognate_providers.base.repositories.keys.KeysRepository``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_MAX_TOKENS, <PROVIDER>_BASE_URL
e.g. OPENAI_MODEL, GOOGLE_MAX_TOKENS.

External Config File (Optional)
-------------------------------
If COGNATE_CONFIG_FILE is set to a path, we attempt to load JSON first and
fall back to YAML. Structure example:

```
openai:
  model: gpt-5
  max_tokens: 4096
deepseek:
  base_url: https://api.deepseek.com
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .env import is_placeholder
from .defaults import (
    DEFAULT_MAX_TOKENS,
    OPENAI_DEFAULT_MODEL,
    ANTHROPIC_DEFAULT_MODEL,
    GEMINI_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_BASE_URL,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "max_tokens": DEFAULT_MAX_TOKENS},
    "anthropic": {"model": ANTHROPIC_DEFAULT_MODEL, "max_tokens": DEFAULT_MAX_TOKENS},
    "google": {"model": GEMINI_DEFAULT_MODEL, "max_tokens": DEFAULT_MAX_TOKENS},
    "deepseek": {
        "model": DEEPSEEK_DEFAULT_MODEL,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "base_url": DEEPSEEK_DEFAULT_BASE_URL,
    },
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "max_tokens": "MAX_TOKENS",
    "base_url": "BASE_URL",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders (e.g., contain 'placeholder').
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("COGNATE_CONFIG_FILE")
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path)
    if not p.exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = p.read_text(encoding="utf-8")
    data: Any
    # Try JSON first
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _coerce_field(field: str, value: Any) -> Any:
    if field != "max_tokens":
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is None or not val.strip():
            continue
        coerced = _coerce_field(field, val.strip())
        if coerced is not None:
            out[field] = coerced
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= {
            k: _coerce_field(k, v) for k, v in file_cfg.items() if _coerce_field(k, v) is not None
        }

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def reset_config_cache() -> None:
    """Forget the cached external config file and .env state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
