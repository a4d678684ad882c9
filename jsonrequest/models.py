"""Request descriptors, response metadata and request results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import httpx

from .exceptions import ErrorKind, JSONRequestError
from .types import Headers, HTTPVerb, JsonDict, JsonList, JsonValue


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully assembled request, ready to hand to the transport."""

    method: HTTPVerb
    url: str
    headers: Headers = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class ResponseMeta:
    """Status line and headers of a received HTTP response.

    Header names are lower case, as delivered by httpx.
    """

    status_code: int
    headers: Headers = field(default_factory=dict)
    url: str = ""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> ResponseMeta:
        return cls(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            url=str(response.url),
        )

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())


class _ResultAccessors:
    data: JsonValue

    @property
    def array_value(self) -> JsonList:
        """The decoded data if it is a JSON array, otherwise an empty list."""
        return self.data if isinstance(self.data, list) else []

    @property
    def dictionary_value(self) -> JsonDict:
        """The decoded data if it is a JSON object, otherwise an empty dict."""
        return self.data if isinstance(self.data, dict) else {}


@dataclass(frozen=True)
class Success(_ResultAccessors):
    """A request that produced an HTTP response with a JSON (or empty) body.

    Attributes
    ----------
    data : JsonValue
        Decoded body; None when the body was empty
    response : ResponseMeta
        Metadata of the response, always present
    """

    data: JsonValue
    response: ResponseMeta

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> JsonValue:
        return self.data


@dataclass(frozen=True)
class Failure(_ResultAccessors):
    """A request that failed.

    Attributes
    ----------
    error : JSONRequestError
        The failure, its ``kind`` names the category
    response : ResponseMeta or None
        Present only if an HTTP response was received
    body : str or None
        Raw response text when bytes were received but not decoded
    """

    error: JSONRequestError
    response: ResponseMeta | None = None
    body: str | None = None

    @property
    def data(self) -> None:
        return None

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def unwrap(self) -> JsonValue:
        """Raise the carried error."""
        raise self.error


Result = Union[Success, Failure]
