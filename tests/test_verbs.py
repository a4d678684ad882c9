"""Per-verb tests against an httpbin-style echo transport."""

import threading

import pytest

import jsonrequest
from jsonrequest.client import JSONRequest
from jsonrequest.exceptions import InvalidURLError, RequestFailedError

GOOD_HOST = "http://httpbin.org"
BAD_HOST = "httpppp://httpbin.org"
PARAMS = {"hello": "world"}
PAYLOAD = {"hi": "there"}


def run_async(function, *args, **kwargs):
    results = []
    done = threading.Event()

    def complete(result):
        results.append(result)
        done.set()

    function(*args, complete=complete, **kwargs)
    assert done.wait(10), "callback never fired"
    assert len(results) == 1
    return results[0]


class TestGET:
    """GET requests."""

    url = f"{GOOD_HOST}/get"

    def test_simple(self, client):
        data = client.get(self.url, query_params=PARAMS)
        assert data["args"]["hello"] == "world"
        assert data["method"] == "GET"
        assert client.http_response.status_code == 200

    def test_dictionary_value(self, client_kwargs):
        data = jsonrequest.get(self.url, query_params=PARAMS, **client_kwargs)
        assert data["args"]["hello"] == "world"

    def test_array_value(self, client_kwargs):
        result = run_async(jsonrequest.get_async, self.url, PARAMS, **client_kwargs)
        assert result.array_value == []
        assert result.dictionary_value["args"] == {"hello": "world"}

    def test_failing(self, client_kwargs):
        with pytest.raises(RequestFailedError):
            jsonrequest.get(f"{BAD_HOST}/get", query_params=PARAMS, **client_kwargs)

    def test_unparseable_url(self, client_kwargs, echo_transport):
        with pytest.raises(InvalidURLError):
            jsonrequest.get("bad url", query_params=PARAMS, **client_kwargs)
        assert echo_transport.requests == []

    def test_async(self, client):
        result = run_async(client.get_async, self.url)
        assert result.error is None

    def test_async_fail(self, client):
        result = run_async(client.get_async, f"{BAD_HOST}/get")
        assert result.error is not None
        assert result.response is None
        assert result.body is None


class TestPOST:
    """POST requests."""

    url = f"{GOOD_HOST}/post"

    def test_simple(self, client):
        data = client.post(self.url, query_params=PARAMS, payload=PAYLOAD)
        assert data["args"]["hello"] == "world"
        assert data["json"]["hi"] == "there"
        assert client.http_response.status_code == 200

    def test_payload_only(self, client_kwargs):
        data = jsonrequest.post(self.url, payload=PAYLOAD, **client_kwargs)
        assert data["json"] == {"hi": "there"}
        assert data["args"] == {}

    def test_failing(self, client_kwargs):
        with pytest.raises(RequestFailedError):
            jsonrequest.post(f"{BAD_HOST}/post", payload=PAYLOAD, **client_kwargs)

    def test_async(self, client_kwargs):
        result = run_async(jsonrequest.post_async, self.url, **client_kwargs)
        assert result.error is None
        assert result.data["json"] is None

    def test_async_fail(self, client_kwargs):
        result = run_async(jsonrequest.post_async, f"{BAD_HOST}/post", **client_kwargs)
        assert result.error is not None


class TestPUT:
    """PUT requests."""

    url = f"{GOOD_HOST}/put"

    def test_simple(self, client):
        data = client.put(self.url, query_params=PARAMS, payload=PAYLOAD)
        assert data["args"]["hello"] == "world"
        assert data["json"]["hi"] == "there"
        assert data["method"] == "PUT"
        assert client.http_response.status_code == 200

    def test_failing(self, client_kwargs):
        with pytest.raises(RequestFailedError):
            jsonrequest.put(f"{BAD_HOST}/put", payload=PAYLOAD, **client_kwargs)

    def test_async(self, client):
        result = run_async(client.put_async, self.url, payload=PAYLOAD)
        assert result.error is None
        assert result.dictionary_value["json"] == PAYLOAD

    def test_async_fail(self, client_kwargs):
        result = run_async(jsonrequest.put_async, f"{BAD_HOST}/put", **client_kwargs)
        assert result.error is not None


class TestPATCH:
    """PATCH requests."""

    url = f"{GOOD_HOST}/patch"

    def test_simple(self, client):
        data = client.patch(self.url, query_params=PARAMS, payload=PAYLOAD)
        assert data["args"]["hello"] == "world"
        assert data["json"]["hi"] == "there"
        assert data["method"] == "PATCH"
        assert client.http_response.status_code == 200

    def test_static(self, client_kwargs):
        data = jsonrequest.patch(self.url, payload=PAYLOAD, **client_kwargs)
        assert data["json"] == PAYLOAD

    def test_failing(self, client_kwargs):
        with pytest.raises(RequestFailedError):
            jsonrequest.patch(f"{BAD_HOST}/patch", payload=PAYLOAD, **client_kwargs)

    def test_async(self, client_kwargs):
        result = run_async(jsonrequest.patch_async, self.url, **client_kwargs)
        assert result.error is None

    def test_async_fail(self, client):
        result = run_async(client.patch_async, f"{BAD_HOST}/patch")
        assert result.error is not None


class TestDELETE:
    """DELETE requests."""

    url = f"{GOOD_HOST}/delete"

    def test_simple(self, client):
        data = client.delete(self.url, query_params=PARAMS)
        assert data["args"]["hello"] == "world"
        assert data["method"] == "DELETE"
        assert client.http_response.status_code == 200

    def test_static(self, client_kwargs):
        data = jsonrequest.delete(self.url, query_params=PARAMS, **client_kwargs)
        assert data["args"] == PARAMS

    def test_failing(self, client_kwargs):
        with pytest.raises(RequestFailedError):
            jsonrequest.delete(f"{BAD_HOST}/delete", query_params=PARAMS, **client_kwargs)

    def test_async(self, client):
        result = run_async(client.delete_async, self.url)
        assert result.error is None

    def test_async_fail(self, client_kwargs):
        result = run_async(jsonrequest.delete_async, f"{BAD_HOST}/delete", **client_kwargs)
        assert result.error is not None


class TestGenericRequest:
    """The verb-agnostic entry points."""

    def test_request(self, client_kwargs):
        data = jsonrequest.request("post", f"{GOOD_HOST}/anything", payload=[1, 2, 3], **client_kwargs)
        assert data["json"] == [1, 2, 3]

    def test_request_async(self, client_kwargs):
        result = run_async(jsonrequest.request_async, "GET", f"{GOOD_HOST}/anything", **client_kwargs)
        assert result.response.status_code == 200

    def test_instance_retains_last_exchange(self, config, echo_transport):
        request = JSONRequest(config, transport=echo_transport)
        request.get(f"{GOOD_HOST}/get")
        request.post(f"{GOOD_HOST}/post", payload=PAYLOAD)
        assert request.http_request.url == f"{GOOD_HOST}/post"
        assert request.http_request.body == b'{"hi":"there"}'
