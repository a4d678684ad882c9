"""Shared type aliases and the HTTP verb enumeration."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping

JsonValue = bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"] | None
JsonList = list[JsonValue]
JsonDict = dict[str, JsonValue]
Headers = dict[str, str]
QueryParams = Mapping[str, Any]
LogSink = Callable[[str], None]


class HTTPVerb(str, Enum):
    """HTTP methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: str | HTTPVerb) -> HTTPVerb:
        """Return the verb for ``value``, accepting any letter case.

        Raises
        ------
        ValueError
            If ``value`` does not name a supported verb
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())
