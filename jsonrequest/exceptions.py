"""Exception classes for jsonrequest.

Every failure a request can produce is one of the classes below. Each class
carries an :class:`ErrorKind` so callers can branch on the kind without a
chain of ``except`` clauses, and the asynchronous API delivers the same
instances as data inside a :class:`~jsonrequest.models.Failure`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Mutually exclusive failure categories of a single request."""

    INVALID_URL = "invalid_url"
    PAYLOAD_SERIALIZATION = "payload_serialization"
    NO_INTERNET_CONNECTION = "no_internet_connection"
    REQUEST_FAILED = "request_failed"
    NON_HTTP_RESPONSE = "non_http_response"
    RESPONSE_DESERIALIZATION = "response_deserialization"
    UNKNOWN_ERROR = "unknown_error"


class JSONRequestError(Exception):
    """Base exception for all jsonrequest errors.

    All custom exceptions in the package inherit from this base class,
    allowing applications to catch every request failure with a single
    except clause if desired.

    Attributes
    ----------
    kind : ErrorKind
        The failure category
    """

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR
    default_message = "Unknown error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidURLError(JSONRequestError):
    """Raised when the target URL cannot be parsed or built.

    Attributes
    ----------
    url : str
        The offending URL string
    """

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PayloadSerializationError(JSONRequestError):
    """Raised when a payload or header value cannot be serialized as JSON."""

    kind = ErrorKind.PAYLOAD_SERIALIZATION
    default_message = "Payload is not representable as JSON"


class NoInternetConnectionError(JSONRequestError):
    """Raised when the reachability probe reports no network route."""

    kind = ErrorKind.NO_INTERNET_CONNECTION
    default_message = "No internet connection"


class RequestFailedError(JSONRequestError):
    """Raised when the transport fails before an HTTP response arrives.

    This typically indicates DNS failures, refused connections, TLS
    problems, unsupported URL schemes or timeouts.

    Attributes
    ----------
    url : str or None
        The URL that failed, when known
    original_error : BaseException
        The underlying exception that caused the failure
    """

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, original_error: BaseException, url: str | None = None):
        self.url = url
        self.original_error = original_error
        target = f" to {url}" if url else ""
        super().__init__(f"Request{target} failed: {original_error!r}")


class NonHTTPResponseError(JSONRequestError):
    """Raised when the transport produced no HTTP response."""

    kind = ErrorKind.NON_HTTP_RESPONSE
    default_message = "Response is not an HTTP response"


class ResponseDeserializationError(JSONRequestError):
    """Raised when a non-empty response body is not valid JSON."""

    kind = ErrorKind.RESPONSE_DESERIALIZATION
    default_message = "Response body is not valid JSON"


class UnknownError(JSONRequestError):
    """Placeholder outcome before a request has completed."""
