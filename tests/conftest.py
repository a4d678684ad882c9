"""Pytest configuration and fixtures."""

import pytest

from jsonrequest.client import JSONRequest
from jsonrequest.config import JSONRequestConfig
from tests.helpers import CountingTransport


@pytest.fixture
def config():
    """Configuration with fast timeouts and no reachability check."""
    return JSONRequestConfig(
        request_timeout=5.0,
        resource_timeout=5.0,
        check_reachability=False,
    )


@pytest.fixture
def echo_transport():
    """Transport answering like httpbin.org."""
    return CountingTransport()


@pytest.fixture
def client(config, echo_transport):
    """Request object wired to the echo transport."""
    return JSONRequest(config, transport=echo_transport)


@pytest.fixture
def client_kwargs(config, echo_transport):
    """Constructor arguments for the module-level convenience functions."""
    return {"config": config, "transport": echo_transport}


@pytest.fixture
def offline_client(echo_transport):
    """Request object whose reachability probe always fails."""
    return JSONRequest(
        JSONRequestConfig(check_reachability=True),
        transport=echo_transport,
        reachability=lambda: False,
    )
