"""JSON encoding and decoding helpers.

Payloads are validated before they are serialized, so an invalid structure
(cycles, non-string keys, NaN, arbitrary objects) never reaches ``json.dumps``.
Decoding is permissive and accepts top-level scalar documents such as
``"text"`` or ``42``.
"""

from __future__ import annotations

import json
import math
from typing import Any, Iterator

from .types import JsonValue

_DONE = object()


def is_valid_json(value: Any) -> bool:
    """Return True if ``value`` is a legal JSON structure.

    Parameters
    ----------
    value : Any
        Candidate value. Lists and tuples count as arrays, dicts with
        string keys as objects.

    Returns
    -------
    bool
        False for cycles, non-string keys, non-finite floats and any
        leaf that is not None, bool, int, float or str
    """
    # Iterative walk: nesting depth is bounded by memory, not the call stack.
    path: set[int] = set()
    stack: list[tuple[Any, Iterator[Any]]] = [(None, iter((value,)))]
    while stack:
        owner, children = stack[-1]
        child = next(children, _DONE)
        if child is _DONE:
            stack.pop()
            path.discard(id(owner))
            continue
        if isinstance(child, (list, tuple, dict)):
            if id(child) in path:
                return False
            if isinstance(child, dict):
                if not all(isinstance(key, str) for key in child):
                    return False
                items = iter(child.values())
            else:
                items = iter(child)
            path.add(id(child))
            stack.append((child, items))
        elif not _is_scalar(child):
            return False
    return True


def _is_scalar(value: Any) -> bool:
    if value is None or isinstance(value, (bool, int, str)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def encode(value: Any, *, pretty: bool = False) -> bytes | None:
    """Serialize ``value`` to UTF-8 JSON bytes.

    Returns None when ``value`` is not a valid JSON structure, or is nested
    deeper than the encoder can follow.
    """
    if not is_valid_json(value):
        return None
    try:
        if pretty:
            text = json.dumps(value, indent=2, ensure_ascii=False)
        else:
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except RecursionError:
        return None
    return text.encode("utf-8")


def decode(data: bytes) -> JsonValue:
    """Parse UTF-8 JSON bytes, allowing top-level fragments.

    Raises
    ------
    ValueError
        If ``data`` is not UTF-8, not a JSON document or nested too deeply
        to parse
    """
    try:
        return json.loads(data.decode("utf-8"))
    except RecursionError as exc:
        raise ValueError("JSON document is nested too deeply") from exc


def to_text(value: Any) -> str:
    """Return the canonical text of a query or header value.

    ``None`` becomes ``null``, booleans ``true``/``false``, integers have no
    decimal point, floats use their shortest round-trip form and strings are
    returned verbatim. Lists and dicts are rendered as compact JSON.

    Raises
    ------
    ValueError
        If ``value`` has no JSON representation
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value!r} has no JSON representation")
        return repr(value)
    if isinstance(value, str):
        return value
    encoded = encode(value)
    if encoded is None:
        raise ValueError(f"{type(value).__name__} value has no JSON representation")
    return encoded.decode("utf-8")


def body_text(data: bytes | None) -> str | None:
    """Decode a raw body for error reporting; None when there are no bytes."""
    if data is None:
        return None
    return data.decode("utf-8", errors="replace")
