"""
Shared fixtures for the SDK tests.

Provides fake HTTP sessions, a client wired to them, and resets the
process-wide network selector and default client between tests.
"""

import json

import pytest
from unittest.mock import Mock

import kaiascan.api.client as client_module
from kaiascan.api.client import KaiascanClient
from kaiascan.api.networks import MAINNET, NetworkProfile, select_network
from kaiascan.api.transport import Transport

TEST_NETWORK = NetworkProfile(name="test", base_url="https://explorer.test/", chain_id="1001")


def make_response(payload=None, status_code=200, body=None):
    """Builds a fake ``requests.Response`` with a JSON (or raw) body."""
    response = Mock()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response.content = body
    return response


def envelope(data=None, code=0, msg="Success"):
    return {"code": code, "data": data, "msg": msg}


@pytest.fixture(autouse=True)
def reset_global_state():
    """Restore mainnet and drop the default client after each test."""
    select_network(MAINNET)
    client_module._default_client = None
    yield
    select_network(MAINNET)
    client_module._default_client = None


@pytest.fixture
def session():
    """A fake session returning a successful empty envelope."""
    fake = Mock()
    fake.headers = {}
    fake.get.return_value = make_response(envelope({}))
    return fake


@pytest.fixture
def client(session):
    """A client pinned to ``TEST_NETWORK`` using the fake session."""
    return KaiascanClient(network=TEST_NETWORK, transport=Transport(session=session))


def requested_url(session, index=-1):
    """Returns the URL passed to ``session.get`` on the given call."""
    return session.get.call_args_list[index][0][0]
