"""Human-readable message extraction for provider SDK exceptions.

SDK exceptions carry their useful message in different places. The extractor
walks an explicit ordered list of attempts and returns the first non-blank
string:

1. Structured API error: ``exc.body["error"]["message"]``,
   ``exc.body["message"]``, ``exc.error.message`` / ``exc.error["message"]``
2. HTTP-response-embedded error: ``exc.response.json()["error"]["message"]``
3. Generic message: ``exc.message``, then ``str(exc)``
4. ``UNEXPECTED_ERROR_MESSAGE``
"""
from __future__ import annotations

import contextlib
from typing import Any, Callable, Optional, Tuple

from ...config.defaults import UNEXPECTED_ERROR_MESSAGE


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def _from_body(exc: BaseException) -> Optional[str]:
    body = getattr(exc, "body", None)
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if error is not None and (message := _text(_get(error, "message"))):
        return message
    return _text(body.get("message"))


def _from_error_attr(exc: BaseException) -> Optional[str]:
    error = getattr(exc, "error", None)
    return _text(_get(error, "message")) if error is not None else None


def _from_response(exc: BaseException) -> Optional[str]:
    response = getattr(exc, "response", None)
    json_fn = getattr(response, "json", None)
    if not callable(json_fn):
        return None
    with contextlib.suppress(Exception):
        data = json_fn()
        if isinstance(data, dict):
            return _text(_get(data.get("error"), "message"))
    return None


def _from_message_attr(exc: BaseException) -> Optional[str]:
    return _text(getattr(exc, "message", None))


def _from_str(exc: BaseException) -> Optional[str]:
    return _text(str(exc))


MESSAGE_ATTEMPTS: Tuple[Callable[[BaseException], Optional[str]], ...] = (
    _from_body,
    _from_error_attr,
    _from_response,
    _from_message_attr,
    _from_str,
)


def extract_error_message(exc: BaseException) -> str:
    """Return the most specific human-readable message for ``exc``."""
    for attempt in MESSAGE_ATTEMPTS:
        if message := attempt(exc):
            return message
    return UNEXPECTED_ERROR_MESSAGE


__all__ = ["extract_error_message", "MESSAGE_ATTEMPTS"]
