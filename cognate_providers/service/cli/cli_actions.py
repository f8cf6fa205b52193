"""CLI action handlers.

Purpose
-------
Subcommand handlers for cognate-cli, keeping the entrypoint minimal. This
module has no top-level side effects and is safe to import in tests.

Fallback & Error Semantics
--------------------------
- Provider failures are reported per result; the exit code is ``1`` when any
  provider failed and ``0`` when all succeeded.
- A blank prompt or an empty selection dispatches nothing and exits ``2``.
- Attachment read failures are printed to stderr; the readable files are
  still sent.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional, Sequence

from ...attachments import FileBlob
from ...base.errors import AttachmentReadError
from ...base.models import CanonicalResult, ResultStatus
from ...catalog import ProviderCatalog
from ...di import ProvidersContainer
from ...dispatch import PromptSession


def apply_selection(
    catalog: ProviderCatalog,
    providers: Optional[Sequence[str]],
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
) -> None:
    """Select exactly ``providers`` (when given) and apply setting overrides.

    Unknown ids are ignored, as everywhere else in the catalog.
    """
    if providers:
        wanted = {p.strip().lower() for p in providers}
        for spec in catalog.providers():
            if spec.selected != (spec.id in wanted):
                catalog.toggle_provider(spec.id)
    if model is not None or max_tokens is not None:
        for spec in catalog.selected():
            catalog.update_provider_settings(spec.id, model=model, max_tokens=max_tokens)


def format_results(results: List[CanonicalResult], catalog: ProviderCatalog) -> str:
    blocks = []
    for r in results:
        spec = catalog.get(r.provider_id)
        label = spec.display_name if spec else r.provider_id
        header = f"== {label} [{r.status.value}] {r.elapsed_ms} ms"
        if r.status is ResultStatus.SUCCESS:
            usage = r.token_usage
            header += f", tokens {usage.prompt_tokens}/{usage.completion_tokens}"
            body = r.content
        else:
            body = r.error_message or ""
        blocks.append(f"{header} ==\n{body}")
    return "\n\n".join(blocks)


async def run_ask(args: argparse.Namespace, session: PromptSession) -> int:
    apply_selection(session.catalog, args.provider, args.model, args.max_tokens)
    if args.attach:
        try:
            await session.attachments.add_attachments([FileBlob.from_path(p) for p in args.attach])
        except AttachmentReadError as exc:
            print(json.dumps({"error": str(exc), "failures": exc.failures}), file=sys.stderr)

    results = await session.submit(args.prompt)
    if not results:
        print(json.dumps({"error": "nothing dispatched: empty prompt or no provider selected"}), file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        print(format_results(results, session.catalog))
    return 1 if any(r.status is ResultStatus.ERROR for r in results) else 0


def handle_ask(args: argparse.Namespace, container: ProvidersContainer) -> int:
    return asyncio.run(run_ask(args, container.session()))


def handle_keys(args: argparse.Namespace, container: ProvidersContainer) -> int:
    store = container.credential_store()
    if args.keys_cmd == "set":
        asyncio.run(store.set(args.provider, args.key))
        return 0
    if args.keys_cmd == "delete":
        asyncio.run(store.delete(args.provider))
        return 0
    if args.keys_cmd == "list":
        for provider in store.list_providers():
            print(provider)
        return 0
    print(json.dumps({"error": "expected one of: set, delete, list"}), file=sys.stderr)
    return 2


def handle_history(args: argparse.Namespace, container: ProvidersContainer) -> int:
    store = container.history_store()
    if args.history_cmd == "list":
        entries = store.list()
        if getattr(args, "json", False):
            print(json.dumps([e.to_dict() for e in entries], indent=2))
        else:
            for e in entries:
                print(f"{e.created_at}  {','.join(e.providers)}  {e.text}")
        return 0
    if args.history_cmd == "clear":
        store.clear()
        return 0
    print(json.dumps({"error": "expected one of: list, clear"}), file=sys.stderr)
    return 2


__all__ = [
    "apply_selection",
    "format_results",
    "run_ask",
    "handle_ask",
    "handle_keys",
    "handle_history",
]
