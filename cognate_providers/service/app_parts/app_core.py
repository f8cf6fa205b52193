"""Request bodies and helpers for the HTTP service.

Attachments travel as base64 strings inside JSON bodies and are decoded into
the same ``AttachmentSet`` the in-process callers use, so the PDF filter and
the blank-mime defaulting behave identically over HTTP.
"""
from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Iterator, List, Optional

from fastapi import HTTPException, Request
from pydantic import BaseModel, Field

from cognate_providers.attachments import AttachmentSet, FileBlob
from cognate_providers.base.models import Attachment, ProviderSpec
from cognate_providers.catalog import ProviderCatalog
from cognate_providers.config.defaults import DEFAULT_MAX_TOKENS
from cognate_providers.config.env import ENV_ALIASES, ENV_MAP
from cognate_providers.di import ProvidersContainer
from cognate_providers.persistence.interfaces.repos import IUnitOfWork
from cognate_providers.persistence.sqlite import get_uow


class AttachmentBody(BaseModel):
    """A file sent inline; ``data`` is standard base64."""

    name: str
    mime_type: str = ""
    data: str


class ProviderBody(BaseModel):
    """One provider entry; omitted settings fall back to the default catalog."""

    id: str
    display_name: Optional[str] = None
    selected: bool = True
    model: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)


class SendPromptBody(BaseModel):
    provider: ProviderBody
    prompt: str
    attachments: List[AttachmentBody] = []


class DispatchBody(BaseModel):
    """A full round; ``providers`` defaults to the selected default catalog."""

    prompt: str
    providers: Optional[List[ProviderBody]] = None
    attachments: List[AttachmentBody] = []


class KeysBody(BaseModel):
    """Mapping of provider id (or its env var name) to API key."""

    keys: Dict[str, str]


class HistoryBody(BaseModel):
    text: str
    providers: List[str] = []
    attachment_names: List[str] = []


def get_container(request: Request) -> ProvidersContainer:
    """FastAPI dependency returning the app's composition root."""
    return request.app.state.container


def get_uow_dep(request: Request) -> Iterator[IUnitOfWork]:
    """FastAPI dependency yielding a UnitOfWork bound to the app database."""
    uow = get_uow(get_container(request).db_path)
    try:
        yield uow
    finally:
        uow.close()


def _build_key_name_map() -> Dict[str, str]:
    """Map provider ids and env var names (canonical and aliases) to provider ids."""
    names: Dict[str, str] = {p: p for p in ENV_MAP}
    names.update({v: k for k, v in ENV_MAP.items()})
    for prov, aliases in ENV_ALIASES.items():
        for n in aliases:
            names.setdefault(n, prov)
    return names


def mask_keys(uow: IUnitOfWork) -> Dict[str, bool]:
    """Return provider id -> whether a key is stored, without exposing values."""
    stored = set(uow.keys.list_providers())
    return {p: p in stored for p in ENV_MAP}


def _to_spec(body: ProviderBody, catalog: ProviderCatalog) -> ProviderSpec:
    base = catalog.get(body.id)
    return ProviderSpec(
        id=body.id,
        display_name=body.display_name or (base.display_name if base else body.id),
        selected=body.selected,
        model=body.model if body.model is not None else (base.model if base else ""),
        max_tokens=body.max_tokens or (base.max_tokens if base else DEFAULT_MAX_TOKENS),
    )


def build_specs(bodies: Optional[List[ProviderBody]]) -> List[ProviderSpec]:
    catalog = ProviderCatalog()
    if bodies is None:
        return catalog.providers()
    return [_to_spec(b, catalog) for b in bodies]


async def decode_attachments(bodies: List[AttachmentBody]) -> List[Attachment]:
    """Decode base64 bodies into accepted PDF attachments (400 on bad base64)."""
    blobs: List[FileBlob] = []
    for item in bodies:
        try:
            data = base64.b64decode(item.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise HTTPException(status_code=400, detail=f"invalid base64 for attachment '{item.name}'") from e
        blobs.append(FileBlob.from_bytes(item.name, data, item.mime_type))
    pending = AttachmentSet()
    return await pending.add_attachments(blobs)


def results_payload(results: List[Any]) -> List[Dict[str, Any]]:
    return [r.to_dict() for r in results]


__all__ = [
    "AttachmentBody",
    "ProviderBody",
    "SendPromptBody",
    "DispatchBody",
    "KeysBody",
    "HistoryBody",
    "get_container",
    "get_uow_dep",
    "_build_key_name_map",
    "mask_keys",
    "build_specs",
    "decode_attachments",
    "results_payload",
]
