from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from cognate_providers.catalog import ProviderCatalog
from cognate_providers.config.defaults import PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS
from cognate_providers.di import ProvidersContainer
from cognate_providers.dispatch import send_prompt
from cognate_providers.persistence.interfaces.repos import IUnitOfWork

from .app_parts.app_core import (
    DispatchBody,
    HistoryBody,
    KeysBody,
    SendPromptBody,
    _build_key_name_map,
    build_specs,
    decode_attachments,
    get_container,
    get_uow_dep,
    mask_keys,
    results_payload,
)


def _register_routes(app: FastAPI) -> None:
    # -----------------------------------------------------------------------
    # Health and catalog
    # -----------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> Dict[str, Any]:
        """Check the health status of the service."""
        return {"ok": True}

    @app.get("/api/providers")
    def get_providers() -> Dict[str, Any]:
        """Return the default provider catalog (config overrides applied)."""
        return {"ok": True, **ProviderCatalog().to_dict()}

    # -----------------------------------------------------------------------
    # Prompt endpoints
    # -----------------------------------------------------------------------

    @app.post("/api/send-prompt")
    async def post_send_prompt(
        body: SendPromptBody, container: ProvidersContainer = Depends(get_container)
    ) -> Dict[str, Any]:
        """Call a single provider. Provider failures are reported in the result, not as HTTP errors."""
        spec = build_specs([body.provider])[0]
        attachments = await decode_attachments(body.attachments)
        outcome = await send_prompt(
            spec,
            body.prompt,
            attachments,
            resolver=container.keys(),
            factory=container.factory,
        )
        return {"ok": True, "result": outcome.to_dict()}

    @app.post("/api/dispatch")
    async def post_dispatch(
        body: DispatchBody, container: ProvidersContainer = Depends(get_container)
    ) -> Dict[str, Any]:
        """Run one round over the given (or default selected) providers."""
        attachments = await decode_attachments(body.attachments)
        dispatcher = container.dispatcher()
        round_ = dispatcher.open_round(body.prompt, build_specs(body.providers), attachments)
        if round_ is None:
            return {"ok": True, "round_id": None, "results": []}
        results = await dispatcher.run_round(round_)
        return {"ok": True, "round_id": round_.board.round_id, "results": results_payload(results)}

    # -----------------------------------------------------------------------
    # Key management
    # -----------------------------------------------------------------------

    @app.get("/api/keys")
    def get_keys(uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        """Report which providers have a stored key without exposing values."""
        return {"ok": True, "keys": mask_keys(uow)}

    @app.post("/api/keys")
    def post_keys(body: KeysBody, uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        """Store keys by provider id or env var name; blank values delete, unknown names are skipped."""
        names = _build_key_name_map()
        stored = []
        for name, key in (body.keys or {}).items():
            provider = names.get(name) or names.get(name.lower())
            if not provider:
                continue
            uow.keys.set_api_key(provider, key)
            stored.append(provider)
        uow.commit()
        return {"ok": True, "stored": stored}

    @app.delete("/api/keys")
    def delete_key(provider: str, uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        """Delete the stored key for ``provider`` (case-insensitive, idempotent)."""
        if not provider.strip():
            raise HTTPException(status_code=400, detail="provider is required")
        uow.keys.delete_api_key(provider)
        uow.commit()
        return {"ok": True, "deleted": provider.strip().lower()}

    # -----------------------------------------------------------------------
    # Prompt history
    # -----------------------------------------------------------------------

    @app.get("/api/history")
    def get_history(uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        return {"ok": True, "history": [e.to_dict() for e in uow.history.list()]}

    @app.post("/api/history")
    def post_history(body: HistoryBody, uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        if not body.text.strip():
            raise HTTPException(status_code=400, detail="text is required")
        entry = uow.history.add(body.text, body.providers, body.attachment_names)
        uow.commit()
        return {"ok": True, "entry": entry.to_dict()}

    @app.delete("/api/history/{entry_id}")
    def delete_history_entry(entry_id: str, uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        uow.history.delete(entry_id)
        uow.commit()
        return {"ok": True, "deleted": entry_id}

    @app.delete("/api/history")
    def clear_history(uow: IUnitOfWork = Depends(get_uow_dep)) -> Dict[str, Any]:
        uow.history.clear()
        uow.commit()
        return {"ok": True}


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(container: Optional[ProvidersContainer] = None) -> FastAPI:
    """Build the FastAPI application around ``container``.

    No database file is touched until the first request that needs one.
    """
    app = FastAPI(title="Cognate Provider Service", version="0.1.0")
    app.state.container = container or ProvidersContainer()

    cors_origins_env = os.getenv("PROVIDER_SERVICE_CORS_ORIGINS", PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS)
    allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_routes(app)
    return app


app = create_app()
