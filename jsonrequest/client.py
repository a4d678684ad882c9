"""Request object with synchronous and asynchronous JSON verbs."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Callable, Mapping

import httpx

from ._http import HTTPClient
from .assembler import assemble
from .classifier import classify
from .config import JSONRequestConfig, get_config
from .exceptions import (
    JSONRequestError,
    NoInternetConnectionError,
    RequestFailedError,
    UnknownError,
)
from .models import Failure, RequestDescriptor, ResponseMeta, Result
from .reachability import is_connected_to_network
from .types import HTTPVerb, JsonValue, QueryParams

logger = logging.getLogger(__name__)

Completion = Callable[[Result], None]


def _deliver(complete: Completion, result: Result, method: str | HTTPVerb, url: str) -> None:
    try:
        complete(result)
    except Exception:
        logger.warning("Completion callback raised for %s %s", method, url, exc_info=True)


class JSONRequest:
    """Client for JSON over HTTP.

    Each call builds a fresh request, sends it on a worker thread with its
    own event loop and classifies the response into a
    :class:`~jsonrequest.models.Success` or
    :class:`~jsonrequest.models.Failure`. The object keeps the last request
    and response for inspection after the call.

    Parameters
    ----------
    config : JSONRequestConfig, optional
        Settings for requests made by this object. Defaults to
        :func:`jsonrequest.config.get_config`.
    transport : httpx.AsyncBaseTransport, optional
        Transport handed to httpx, mainly for tests
    reachability : Callable[[], bool], optional
        Network availability probe. Defaults to
        :func:`jsonrequest.reachability.is_connected_to_network`.

    Examples
    --------
    >>> request = JSONRequest()
    >>> data = request.get("https://httpbin.org/get", query_params={"q": 1})
    >>> request.http_response.status_code
    200
    """

    def __init__(
        self,
        config: JSONRequestConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        reachability: Callable[[], bool] | None = None,
    ):
        self.config = config or get_config()
        self._transport = transport
        self._reachability = reachability or is_connected_to_network
        self.http_request: RequestDescriptor | None = None
        self.http_response: ResponseMeta | None = None

    # ---------------- Pipeline -----------------

    async def send(
        self,
        method: str | HTTPVerb,
        url: str,
        query_params: QueryParams | None = None,
        payload: Any = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Result:
        """Send one request and return its result.

        Awaitable form of the pipeline for callers that already run an event
        loop. Failures are returned, not raised.
        """
        config = self.config
        if not self._is_reachable(config):
            return Failure(NoInternetConnectionError())
        return await self._submit(config, method, url, query_params, payload, headers)

    def submit_async(
        self,
        method: str | HTTPVerb,
        url: str,
        query_params: QueryParams | None = None,
        payload: Any = None,
        headers: Mapping[str, Any] | None = None,
        *,
        complete: Completion,
    ) -> None:
        """Send one request in the background and report it to ``complete``.

        The reachability probe runs on the calling thread; if it fails,
        ``complete`` is invoked before this method returns. Otherwise the
        request runs on a worker thread and ``complete`` is called exactly
        once from that thread.
        """
        method = HTTPVerb.parse(method)
        config = self.config
        if not self._is_reachable(config):
            _deliver(complete, Failure(NoInternetConnectionError()), method, url)
            return

        worker = threading.Thread(
            target=self._run,
            args=(config, method, url, query_params, payload, headers, complete),
            name="jsonrequest-worker",
            daemon=True,
        )
        worker.start()

    def submit_sync(
        self,
        method: str | HTTPVerb,
        url: str,
        query_params: QueryParams | None = None,
        payload: Any = None,
        headers: Mapping[str, Any] | None = None,
    ) -> JsonValue:
        """Send one request and block until it completes.

        Returns
        -------
        JsonValue
            Decoded response body, None for an empty body

        Raises
        ------
        JSONRequestError
            The error of the failed request. Use :meth:`send` or
            :meth:`submit_async` to also see the response and raw body.
        """
        done = threading.Event()
        outcome: list[Result] = [Failure(UnknownError())]

        def complete(result: Result) -> None:
            outcome[0] = result
            done.set()

        self.submit_async(method, url, query_params, payload, headers, complete=complete)
        done.wait()
        return outcome[0].unwrap()

    def _is_reachable(self, config: JSONRequestConfig) -> bool:
        return not config.check_reachability or self._reachability()

    def _run(
        self,
        config: JSONRequestConfig,
        method: str | HTTPVerb,
        url: str,
        query_params: QueryParams | None,
        payload: Any,
        headers: Mapping[str, Any] | None,
        complete: Completion,
    ) -> None:
        try:
            result = asyncio.run(self._submit(config, method, url, query_params, payload, headers))
        except Exception as exc:
            logger.exception("Request pipeline failed for %s %s", method, url)
            result = Failure(RequestFailedError(exc, url=url))
        _deliver(complete, result, method, url)

    async def _submit(
        self,
        config: JSONRequestConfig,
        method: str | HTTPVerb,
        url: str,
        query_params: QueryParams | None,
        payload: Any,
        headers: Mapping[str, Any] | None,
    ) -> Result:
        try:
            descriptor = assemble(method, url, query_params, payload, headers)
        except JSONRequestError as exc:
            return Failure(exc)

        self.http_request = descriptor
        self.http_response = None
        outcome = await HTTPClient(config, self._transport).execute(descriptor)
        self.http_response = outcome.response
        return classify(outcome.body, outcome.response, outcome.error, url=descriptor.url)

    # ---------------- Synchronous verbs -----------------

    def get(self, url: str, query_params: QueryParams | None = None,
            payload: Any = None, headers: Mapping[str, Any] | None = None) -> JsonValue:
        return self.submit_sync(HTTPVerb.GET, url, query_params, payload, headers)

    def post(self, url: str, query_params: QueryParams | None = None,
             payload: Any = None, headers: Mapping[str, Any] | None = None) -> JsonValue:
        return self.submit_sync(HTTPVerb.POST, url, query_params, payload, headers)

    def put(self, url: str, query_params: QueryParams | None = None,
            payload: Any = None, headers: Mapping[str, Any] | None = None) -> JsonValue:
        return self.submit_sync(HTTPVerb.PUT, url, query_params, payload, headers)

    def patch(self, url: str, query_params: QueryParams | None = None,
              payload: Any = None, headers: Mapping[str, Any] | None = None) -> JsonValue:
        return self.submit_sync(HTTPVerb.PATCH, url, query_params, payload, headers)

    def delete(self, url: str, query_params: QueryParams | None = None,
               payload: Any = None, headers: Mapping[str, Any] | None = None) -> JsonValue:
        return self.submit_sync(HTTPVerb.DELETE, url, query_params, payload, headers)

    # ---------------- Asynchronous verbs -----------------

    def get_async(self, url: str, query_params: QueryParams | None = None,
                  payload: Any = None, headers: Mapping[str, Any] | None = None,
                  *, complete: Completion) -> None:
        self.submit_async(HTTPVerb.GET, url, query_params, payload, headers, complete=complete)

    def post_async(self, url: str, query_params: QueryParams | None = None,
                   payload: Any = None, headers: Mapping[str, Any] | None = None,
                   *, complete: Completion) -> None:
        self.submit_async(HTTPVerb.POST, url, query_params, payload, headers, complete=complete)

    def put_async(self, url: str, query_params: QueryParams | None = None,
                  payload: Any = None, headers: Mapping[str, Any] | None = None,
                  *, complete: Completion) -> None:
        self.submit_async(HTTPVerb.PUT, url, query_params, payload, headers, complete=complete)

    def patch_async(self, url: str, query_params: QueryParams | None = None,
                    payload: Any = None, headers: Mapping[str, Any] | None = None,
                    *, complete: Completion) -> None:
        self.submit_async(HTTPVerb.PATCH, url, query_params, payload, headers, complete=complete)

    def delete_async(self, url: str, query_params: QueryParams | None = None,
                     payload: Any = None, headers: Mapping[str, Any] | None = None,
                     *, complete: Completion) -> None:
        self.submit_async(HTTPVerb.DELETE, url, query_params, payload, headers, complete=complete)
