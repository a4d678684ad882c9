"""Internal HTTP transport for jsonrequest.

This module provides a thin wrapper around httpx that sends one request
descriptor and reports the outcome as data instead of raising.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

import httpx

from . import logs
from .config import JSONRequestConfig
from .models import RequestDescriptor, ResponseMeta

logger = logging.getLogger(__name__)


@dataclass
class TransportOutcome:
    """Terminal outcome of one transport operation.

    Exactly one of ``error`` and ``response`` is set by :class:`HTTPClient`.
    """

    body: bytes | None = None
    response: ResponseMeta | None = None
    error: BaseException | None = None
    elapsed: float = 0.0


class HTTPClient:
    """Async HTTP sender with configurable timeouts and user agent.

    Every call opens its own ``httpx.AsyncClient``; nothing is pooled or
    shared between requests.

    Parameters
    ----------
    config : JSONRequestConfig
        Timeouts, user agent and trace settings for this request
    transport : httpx.AsyncBaseTransport, optional
        Transport handed to httpx, ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        config: JSONRequestConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._transport = transport

    def _session(self) -> httpx.AsyncClient:
        headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.request_timeout),
            headers=headers,
            transport=self._transport,
        )

    async def execute(self, descriptor: RequestDescriptor) -> TransportOutcome:
        """Send ``descriptor`` and return its outcome.

        Transport level failures (DNS, refused connections, TLS, unsupported
        schemes, timeouts) are returned in ``TransportOutcome.error``. HTTP
        error status codes are ordinary responses.
        """
        logs.trace(
            self.config.log,
            logs.request_lines,
            descriptor,
            self.config.sensitive_headers,
        )

        start = time.monotonic()
        try:
            async with self._session() as session:
                resp = await asyncio.wait_for(
                    session.request(
                        descriptor.method.value,
                        descriptor.url,
                        headers=descriptor.headers,
                        content=descriptor.body,
                    ),
                    timeout=self.config.resource_timeout,
                )
            outcome = TransportOutcome(body=resp.content, response=ResponseMeta.from_httpx(resp))
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as exc:
            outcome = TransportOutcome(error=exc)
        except Exception as exc:
            logger.warning("Unexpected transport failure for %s", descriptor.url, exc_info=True)
            outcome = TransportOutcome(error=exc)
        outcome.elapsed = time.monotonic() - start

        logs.trace(
            self.config.log,
            logs.response_lines,
            outcome.elapsed,
            outcome.body,
            outcome.response,
            outcome.error,
            self.config.sensitive_headers,
        )
        return outcome
