"""Module-level convenience functions.

Each function creates a transient :class:`~jsonrequest.client.JSONRequest`
for a single call. Extra keyword arguments (``config``, ``transport``,
``reachability``) are passed to its constructor.
"""

from __future__ import annotations

from typing import Any, Mapping

from .client import Completion, JSONRequest
from .types import HTTPVerb, JsonValue, QueryParams


def request(
    method: str | HTTPVerb,
    url: str,
    query_params: QueryParams | None = None,
    payload: Any = None,
    headers: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> JsonValue:
    """Send a request and return the decoded body.

    Raises
    ------
    JSONRequestError
        If the request fails for any reason
    """
    return JSONRequest(**kwargs).submit_sync(method, url, query_params, payload, headers)


def request_async(
    method: str | HTTPVerb,
    url: str,
    query_params: QueryParams | None = None,
    payload: Any = None,
    headers: Mapping[str, Any] | None = None,
    *,
    complete: Completion,
    **kwargs: Any,
) -> None:
    """Send a request in the background; ``complete`` receives the result."""
    JSONRequest(**kwargs).submit_async(
        method, url, query_params, payload, headers, complete=complete
    )


def get(url: str, query_params: QueryParams | None = None, payload: Any = None,
        headers: Mapping[str, Any] | None = None, **kwargs: Any) -> JsonValue:
    return request(HTTPVerb.GET, url, query_params, payload, headers, **kwargs)


def post(url: str, query_params: QueryParams | None = None, payload: Any = None,
         headers: Mapping[str, Any] | None = None, **kwargs: Any) -> JsonValue:
    return request(HTTPVerb.POST, url, query_params, payload, headers, **kwargs)


def put(url: str, query_params: QueryParams | None = None, payload: Any = None,
        headers: Mapping[str, Any] | None = None, **kwargs: Any) -> JsonValue:
    return request(HTTPVerb.PUT, url, query_params, payload, headers, **kwargs)


def patch(url: str, query_params: QueryParams | None = None, payload: Any = None,
          headers: Mapping[str, Any] | None = None, **kwargs: Any) -> JsonValue:
    return request(HTTPVerb.PATCH, url, query_params, payload, headers, **kwargs)


def delete(url: str, query_params: QueryParams | None = None, payload: Any = None,
           headers: Mapping[str, Any] | None = None, **kwargs: Any) -> JsonValue:
    return request(HTTPVerb.DELETE, url, query_params, payload, headers, **kwargs)


def get_async(url: str, query_params: QueryParams | None = None, payload: Any = None,
              headers: Mapping[str, Any] | None = None, *, complete: Completion,
              **kwargs: Any) -> None:
    request_async(HTTPVerb.GET, url, query_params, payload, headers, complete=complete, **kwargs)


def post_async(url: str, query_params: QueryParams | None = None, payload: Any = None,
               headers: Mapping[str, Any] | None = None, *, complete: Completion,
               **kwargs: Any) -> None:
    request_async(HTTPVerb.POST, url, query_params, payload, headers, complete=complete, **kwargs)


def put_async(url: str, query_params: QueryParams | None = None, payload: Any = None,
              headers: Mapping[str, Any] | None = None, *, complete: Completion,
              **kwargs: Any) -> None:
    request_async(HTTPVerb.PUT, url, query_params, payload, headers, complete=complete, **kwargs)


def patch_async(url: str, query_params: QueryParams | None = None, payload: Any = None,
                headers: Mapping[str, Any] | None = None, *, complete: Completion,
                **kwargs: Any) -> None:
    request_async(HTTPVerb.PATCH, url, query_params, payload, headers, complete=complete, **kwargs)


def delete_async(url: str, query_params: QueryParams | None = None, payload: Any = None,
                 headers: Mapping[str, Any] | None = None, *, complete: Completion,
                 **kwargs: Any) -> None:
    request_async(HTTPVerb.DELETE, url, query_params, payload, headers, complete=complete, **kwargs)
