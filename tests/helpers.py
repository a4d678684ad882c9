import json

import httpx


def httpbin_echo(request: httpx.Request) -> httpx.Response:
    """Answer like httpbin.org: echo query args, headers and JSON body."""
    if request.url.scheme not in ("http", "https"):
        raise httpx.UnsupportedProtocol(
            f"Request URL has an unsupported protocol '{request.url.scheme}://'.",
            request=request,
        )
    body = {
        "args": dict(request.url.params),
        "headers": dict(request.headers),
        "method": request.method,
        "url": str(request.url),
        "json": json.loads(request.content) if request.content else None,
    }
    return httpx.Response(200, json=body)


class CountingTransport(httpx.MockTransport):
    """Mock transport that records every request it receives."""

    def __init__(self, handler=httpbin_echo):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def nested_list(depth: int) -> list:
    """Build ``[[[...]]]`` nested ``depth`` levels below the outer list."""
    value: list = []
    for _ in range(depth):
        value = [value]
    return value
