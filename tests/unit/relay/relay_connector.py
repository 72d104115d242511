"""Unit tests for the upstream connector."""

from __future__ import annotations

import asyncio

import pytest
from websockets.datastructures import Headers
from websockets.exceptions import InvalidStatus
from websockets.http11 import Response

from realtime_proxy.errors import (
    HandshakeRejectedError,
    MissingCredentialError,
    UpstreamTransportError,
)
from realtime_proxy.handlers.websocket.connector import UpstreamConnector
from realtime_proxy.handlers.websocket.settings import RelaySettings
from tests.helpers.relay import FakeConnectFactory, FakeUpstreamConnection

_URL = "wss://upstream.test/v1/realtime?model=gpt-4o-realtime-preview"


def _settings(**changes) -> RelaySettings:
    return RelaySettings(upstream_url=_URL, api_key="sk-test-1234", open_timeout_s=2.5).with_overrides(**changes)


def test_missing_key_never_attempts_a_connection() -> None:
    factory = FakeConnectFactory(FakeUpstreamConnection())
    connector = UpstreamConnector(factory)

    with pytest.raises(MissingCredentialError) as exc_info:
        asyncio.run(connector.connect(_settings(api_key="")))

    assert exc_info.value.reason == "missing OPENAI_API_KEY"
    assert factory.calls == []


def test_connect_sends_bearer_and_beta_headers() -> None:
    connection = FakeUpstreamConnection()
    factory = FakeConnectFactory(connection)
    connector = UpstreamConnector(factory)

    result = asyncio.run(connector.connect(_settings()))

    assert result is connection
    url, kwargs = factory.calls[0]
    assert url == _URL
    assert kwargs["additional_headers"] == {
        "Authorization": "Bearer sk-test-1234",
        "OpenAI-Beta": "realtime=v1",
    }
    assert kwargs["open_timeout"] == 2.5
    assert kwargs["ping_interval"] is None


def test_rejected_handshake_reports_status() -> None:
    response = Response(401, "Unauthorized", Headers(), b"")
    factory = FakeConnectFactory(error=InvalidStatus(response))
    connector = UpstreamConnector(factory)

    with pytest.raises(HandshakeRejectedError) as exc_info:
        asyncio.run(connector.connect(_settings()))

    assert exc_info.value.status == 401
    assert exc_info.value.reason == "openai unexpected-response 401"
    assert len(factory.calls) == 1


@pytest.mark.parametrize(
    "error",
    [
        ConnectionRefusedError("refused"),
        TimeoutError(),
        OSError("Name or service not known"),
        ValueError("Port could not be cast to integer value as 'abc'"),
    ],
)
def test_transport_failures_map_to_openai_error(error: BaseException) -> None:
    connector = UpstreamConnector(FakeConnectFactory(error=error))

    with pytest.raises(UpstreamTransportError) as exc_info:
        asyncio.run(connector.connect(_settings()))

    assert exc_info.value.reason == "openai error"
    assert str(exc_info.value)
