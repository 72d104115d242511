"""Route-level tests for WebSocket upgrade handling."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from realtime_proxy.handlers.connections import PairRegistry
from realtime_proxy.handlers.websocket import UpstreamConnector, is_realtime_path
from tests.helpers.app import TEST_SETTINGS, build_app
from tests.helpers.relay import FakeConnectFactory, FakeUpstreamConnection

_GREETING = '{"type":"session.created"}'


def _echo_factory() -> FakeConnectFactory:
    return FakeConnectFactory(build=lambda: FakeUpstreamConnection(greeting=_GREETING, echo=True))


def test_is_realtime_path_matches_prefix_only() -> None:
    assert is_realtime_path("/realtime", "/realtime")
    assert is_realtime_path("/realtime/session", "/realtime")
    assert not is_realtime_path("/", "/realtime")
    assert not is_realtime_path("/api/realtime", "/realtime")
    assert not is_realtime_path("/realtime", "")


@pytest.mark.parametrize("path", ["/", "/other", "/health", "/api/realtime"])
def test_upgrade_outside_prefix_is_refused(path: str) -> None:
    factory = _echo_factory()
    registry = PairRegistry()
    client = TestClient(build_app(connector=UpstreamConnector(factory), registry=registry))

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect(path):
            pass

    assert factory.calls == []
    assert registry.get_pair_count() == 0


def test_missing_key_closes_with_internal_error() -> None:
    factory = _echo_factory()
    app = build_app(
        settings=TEST_SETTINGS.with_overrides(api_key=""),
        connector=UpstreamConnector(factory),
    )
    client = TestClient(app)

    with client.websocket_connect("/realtime") as ws:
        with pytest.raises(WebSocketDisconnect) as exc_info:
            ws.receive_text()

    assert exc_info.value.code == 1011
    assert exc_info.value.reason == "missing OPENAI_API_KEY"
    assert factory.calls == []


def test_frames_are_relayed_through_the_upstream() -> None:
    factory = _echo_factory()
    registry = PairRegistry()
    client = TestClient(build_app(connector=UpstreamConnector(factory), registry=registry))

    with client.websocket_connect("/realtime?model=gpt-4o-realtime-preview") as ws:
        assert ws.receive_text() == _GREETING
        assert registry.get_pair_count() == 1

        ws.send_bytes(b"\x00\x01\x02pcm16")
        assert ws.receive_bytes() == b"\x00\x01\x02pcm16"

        ws.send_text('{"type":"response.create"}')
        assert ws.receive_text() == '{"type":"response.create"}'

    url, kwargs = factory.calls[0]
    assert url == TEST_SETTINGS.upstream_url
    assert kwargs["additional_headers"]["Authorization"] == "Bearer sk-test-1234"
    assert kwargs["additional_headers"]["OpenAI-Beta"] == "realtime=v1"
    assert factory.connection.sent == [b"\x00\x01\x02pcm16", '{"type":"response.create"}']
    assert registry.get_pair_count() == 0


def test_subpaths_of_the_prefix_are_relayed() -> None:
    factory = _echo_factory()
    client = TestClient(build_app(connector=UpstreamConnector(factory)))

    with client.websocket_connect("/realtime/v2") as ws:
        assert ws.receive_text() == _GREETING

    assert len(factory.calls) == 1
