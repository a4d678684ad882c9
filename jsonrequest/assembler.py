"""Build request descriptors from verb, URL, parameters, payload and headers."""

from __future__ import annotations

from typing import Any, Mapping

from .codec import encode, to_text
from .exceptions import PayloadSerializationError
from .models import RequestDescriptor
from .types import Headers, HTTPVerb, QueryParams
from .url import build_url

DEFAULT_HEADERS: Headers = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def assemble(
    method: str | HTTPVerb,
    url: str,
    query_params: QueryParams | None = None,
    payload: Any = None,
    headers: Mapping[str, Any] | None = None,
) -> RequestDescriptor:
    """Assemble a fresh request descriptor.

    Parameters
    ----------
    method : str or HTTPVerb
        HTTP verb, any letter case
    url : str
        Target URL, possibly with an existing query string
    query_params : Mapping[str, Any], optional
        Query items appended to ``url``
    payload : Any, optional
        JSON value sent as the request body. None means no body.
    headers : Mapping[str, Any], optional
        Extra headers applied on top of the JSON defaults

    Returns
    -------
    RequestDescriptor
        The ready-to-send request

    Raises
    ------
    InvalidURLError
        If the URL cannot be built
    PayloadSerializationError
        If the payload or a header value is not representable as JSON
    ValueError
        If ``method`` is not a supported verb
    """
    verb = HTTPVerb.parse(method)
    target = build_url(url, query_params)

    body = None
    if payload is not None:
        body = encode(payload)
        if body is None:
            raise PayloadSerializationError()

    return RequestDescriptor(
        method=verb,
        url=target,
        headers=merge_headers(headers),
        body=body,
    )


def merge_headers(headers: Mapping[str, Any] | None = None) -> Headers:
    """Overlay caller headers on the JSON defaults.

    Header names compare case-insensitively; the caller's spelling wins.
    """
    merged = dict(DEFAULT_HEADERS)
    for name, value in (headers or {}).items():
        try:
            text = to_text(value)
        except ValueError as exc:
            raise PayloadSerializationError(f"Header {name!r}: {exc}") from exc
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = text
    return merged
