"""URL construction with query parameter merging."""

from __future__ import annotations

import re
import string
from urllib.parse import quote, urlsplit, urlunsplit

from .codec import to_text
from .exceptions import InvalidURLError
from .types import QueryParams

# RFC 3986 reserved and unreserved characters plus the percent sign.
_URL_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters left as-is inside a query key or value. "&", "=", "+" and "#"
# are always escaped since they would change how the query is read back.
_QUERY_SAFE = "-._~!$'()*,;:@/?"


def build_url(base: str, params: QueryParams | None = None) -> str:
    """Merge ``params`` into the query string of ``base``.

    Query items already present in ``base`` are kept as they are and the new
    items are appended after them in mapping order. Keys are never
    deduplicated, so a key supplied both ways appears twice.

    Parameters
    ----------
    base : str
        Absolute or relative URL, possibly with a query string. The empty
        string is accepted and yields an empty URL.
    params : Mapping[str, Any], optional
        Extra query parameters. Values are converted with
        :func:`jsonrequest.codec.to_text`.

    Returns
    -------
    str
        The final URL

    Raises
    ------
    InvalidURLError
        If ``base`` cannot be parsed or a parameter value has no canonical text
    """
    parts = _split(base)
    if not params:
        return base

    items = []
    for key, value in params.items():
        try:
            text = to_text(value)
        except ValueError as exc:
            raise InvalidURLError(base, f"query parameter {key!r}: {exc}") from exc
        items.append(f"{quote(str(key), safe=_QUERY_SAFE)}={quote(text, safe=_QUERY_SAFE)}")

    query = "&".join(item for item in [parts.query, *items] if item)
    return urlunsplit(parts._replace(query=query))


def _split(base: str):
    bad = sorted({ch for ch in base if ch not in _URL_CHARACTERS})
    if bad:
        raise InvalidURLError(base, f"disallowed characters {''.join(bad)!r}")
    if _BAD_ESCAPE.search(base):
        raise InvalidURLError(base, "malformed percent-encoding")
    try:
        parts = urlsplit(base)
        parts.port  # noqa: B018 - validates the port number
    except ValueError as exc:
        raise InvalidURLError(base, str(exc)) from exc
    return parts
