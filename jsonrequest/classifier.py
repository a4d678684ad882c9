"""Turn a raw transport outcome into a request result."""

from __future__ import annotations

from .codec import body_text, decode
from .exceptions import (
    NonHTTPResponseError,
    RequestFailedError,
    ResponseDeserializationError,
)
from .models import Failure, ResponseMeta, Result, Success


def classify(
    body: bytes | None,
    response: ResponseMeta | None,
    error: BaseException | None,
    url: str | None = None,
) -> Result:
    """Classify the outcome of one request.

    The checks run in a fixed order: a transport error wins over everything,
    then a missing HTTP response, then an empty body (a success with no
    data), and finally JSON decoding of the body.
    """
    if error is not None:
        return Failure(
            RequestFailedError(error, url=url),
            response=response,
            body=body_text(body),
        )

    if response is None:
        return Failure(NonHTTPResponseError())

    if not body:
        return Success(data=None, response=response)

    try:
        data = decode(body)
    except ValueError:
        return Failure(
            ResponseDeserializationError(),
            response=response,
            body=body_text(body),
        )
    return Success(data=data, response=response)
