"""Cognate CLI (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no provider logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from ...di import ProvidersContainer
from .cli_actions import handle_ask, handle_history, handle_keys
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None, container: Optional[ProvidersContainer] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    container: Optional[ProvidersContainer]
        Composition root; built from ``--db`` when omitted.

    Returns
    -------
    int
        Process exit code.
    """
    p = build_parser()
    args = p.parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.cmd is None:
        p.print_help()
        return 2
    container = container or ProvidersContainer(db_path=args.db)
    if args.cmd == "keys":
        return handle_keys(args, container)
    if args.cmd == "history":
        return handle_history(args, container)
    return handle_ask(args, container)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
