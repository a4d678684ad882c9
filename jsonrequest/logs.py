"""Request and response tracing.

Trace lines go to the ``jsonrequest`` loggers at DEBUG level and, when
configured, to the user supplied log sink. Tracing is purely observational:
a failing sink is reported and otherwise ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable

from .codec import decode, encode
from .models import RequestDescriptor, ResponseMeta
from .types import Headers, LogSink

logger = logging.getLogger(__name__)

REQUEST_BANNER = ">>>>>>>>>> JSON Request >>>>>>>>>>"
RESPONSE_BANNER = "<<<<<<<<<< JSON Response <<<<<<<<<<"


def request_lines(
    descriptor: RequestDescriptor,
    sensitive_headers: Iterable[str] = (),
) -> list[str]:
    lines = [
        REQUEST_BANNER,
        f"HTTP Method: {descriptor.method.value}",
        f"Url: {descriptor.url}",
        f"Headers: {pretty(masked_headers(descriptor.headers, sensitive_headers))}",
    ]
    if descriptor.body is not None:
        lines.append(f"Payload: {descriptor.body.decode('utf-8', errors='replace')}")
    return lines


def response_lines(
    elapsed: float,
    body: bytes | None,
    response: ResponseMeta | None,
    error: BaseException | None,
    sensitive_headers: Iterable[str] = (),
) -> list[str]:
    lines = [RESPONSE_BANNER, f"Time Elapsed: {elapsed:.6f}"]
    if response is not None:
        lines.append(f"Status Code: {response.status_code}")
        lines.append(f"Headers: {pretty(masked_headers(response.headers, sensitive_headers))}")
    if body:
        try:
            lines.append(f"Body: {pretty(decode(body))}")
        except ValueError:
            pass  # undecodable bodies are reported by the classifier
    if error is not None:
        lines.append(f"Error: {error}")
    return lines


def masked_headers(headers: Headers, sensitive_headers: Iterable[str]) -> Headers:
    sensitive = {name.lower() for name in sensitive_headers}
    return {
        name: masked_header_value(value) if name.lower() in sensitive else value
        for name, value in headers.items()
    }


def masked_header_value(value: str) -> str:
    return f"{value[:10]}*** ({len(value)} chars)"


def pretty(value: object) -> str:
    encoded = encode(value, pretty=True)
    return encoded.decode("utf-8") if encoded is not None else ""


def emit(lines: list[str], sink: LogSink | None) -> None:
    """Send trace lines to the module logger and the optional sink."""
    for line in lines:
        logger.debug(line)
    if sink is None:
        return
    try:
        for line in lines:
            sink(line)
    except Exception:
        logger.warning("Log sink raised while tracing a request", exc_info=True)


def trace(
    sink: LogSink | None,
    build: Callable[..., list[str]],
    *args: Any,
) -> None:
    """Build trace lines with ``build(*args)`` and emit them.

    Nothing is built when there is no sink and DEBUG logging is off. A
    formatting failure is logged and dropped, never raised to the caller.
    """
    if sink is None and not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        lines = build(*args)
    except Exception:
        logger.warning("Could not format request trace", exc_info=True)
        return
    emit(lines, sink)
