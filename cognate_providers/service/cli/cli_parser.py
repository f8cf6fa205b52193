"""CLI parser construction for cognate-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Subcommands
    -----------
    - ``ask``: run one dispatch round and print the results
    - ``keys set|delete|list``: manage stored API keys
    - ``history list|clear``: inspect or clear prompt history

    No I/O or network calls occur here.
    """
    p = argparse.ArgumentParser(prog="cognate-cli", description="Send one prompt to several LLM providers")
    p.add_argument("--db", default=None, help="SQLite file for keys and history (default: COGNATE_DB_PATH)")
    sub = p.add_subparsers(dest="cmd")

    # ask
    p_ask = sub.add_parser("ask", help="Dispatch a prompt to the selected providers")
    p_ask.add_argument("prompt")
    p_ask.add_argument(
        "--provider",
        action="append",
        default=None,
        help="Provider id to include (repeatable; default: catalog selection)",
    )
    p_ask.add_argument("--attach", action="append", default=[], help="PDF file to attach (repeatable)")
    p_ask.add_argument("--model", default=None, help="Model override applied to every chosen provider")
    p_ask.add_argument("--max-tokens", type=int, default=None)
    p_ask.add_argument("--json", action="store_true")

    # keys
    p_keys = sub.add_parser("keys", help="Manage stored API keys")
    keys_sub = p_keys.add_subparsers(dest="keys_cmd")
    p_set = keys_sub.add_parser("set", help="Store a key (blank value deletes)")
    p_set.add_argument("provider")
    p_set.add_argument("key")
    p_del = keys_sub.add_parser("delete", help="Delete a stored key")
    p_del.add_argument("provider")
    keys_sub.add_parser("list", help="List providers with stored keys")

    # history
    p_hist = sub.add_parser("history", help="Inspect prompt history")
    hist_sub = p_hist.add_subparsers(dest="history_cmd")
    p_hlist = hist_sub.add_parser("list", help="Print history, newest first")
    p_hlist.add_argument("--json", action="store_true")
    hist_sub.add_parser("clear", help="Delete every history entry")

    return p
