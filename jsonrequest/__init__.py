"""Small client for JSON over HTTP.

>>> import jsonrequest
>>> data = jsonrequest.get("https://httpbin.org/get", query_params={"hello": "world"})
>>> data["args"]["hello"]
'world'
"""

__version__ = "0.1.0"

from .api import (
    delete,
    delete_async,
    get,
    get_async,
    patch,
    patch_async,
    post,
    post_async,
    put,
    put_async,
    request,
    request_async,
)
from .client import JSONRequest
from .config import JSONRequestConfig, get_config, load_dotenv_for_sdk
from .exceptions import (
    ErrorKind,
    InvalidURLError,
    JSONRequestError,
    NoInternetConnectionError,
    NonHTTPResponseError,
    PayloadSerializationError,
    RequestFailedError,
    ResponseDeserializationError,
    UnknownError,
)
from .models import Failure, RequestDescriptor, ResponseMeta, Result, Success
from .types import HTTPVerb, JsonValue

__all__ = [
    "JSONRequest",
    "JSONRequestConfig",
    "get_config",
    "load_dotenv_for_sdk",
    "HTTPVerb",
    "JsonValue",
    "RequestDescriptor",
    "ResponseMeta",
    "Result",
    "Success",
    "Failure",
    "ErrorKind",
    "JSONRequestError",
    "InvalidURLError",
    "PayloadSerializationError",
    "NoInternetConnectionError",
    "RequestFailedError",
    "NonHTTPResponseError",
    "ResponseDeserializationError",
    "UnknownError",
    "request",
    "request_async",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "get_async",
    "post_async",
    "put_async",
    "patch_async",
    "delete_async",
    "__version__",
]
