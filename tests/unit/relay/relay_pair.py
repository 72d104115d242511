"""Unit tests for connection pairs driven end to end with fake legs."""

from __future__ import annotations

import asyncio

from websockets.datastructures import Headers
from websockets.exceptions import ConnectionClosedError, InvalidStatus
from websockets.http11 import Response

from realtime_proxy.handlers.connections import PairRegistry
from realtime_proxy.handlers.websocket.connector import UpstreamConnector
from realtime_proxy.handlers.websocket.frames import Frame
from realtime_proxy.handlers.websocket.legs import LegState
from realtime_proxy.handlers.websocket.lifecycle import PairState
from realtime_proxy.handlers.websocket.pair import ConnectionPair
from realtime_proxy.handlers.websocket.settings import RelaySettings
from tests.helpers.relay import (
    FakeConnectFactory,
    FakeLeg,
    FakeUpstreamConnection,
    wait_until,
)

_SETTINGS = RelaySettings(
    upstream_url="wss://upstream.test/v1/realtime",
    api_key="sk-test-1234",
    close_grace_s=0.2,
)


def _pair(
    factory: FakeConnectFactory,
    settings: RelaySettings = _SETTINGS,
) -> tuple[FakeLeg, ConnectionPair]:
    client = FakeLeg("client")
    pair = ConnectionPair(client, settings, connector=UpstreamConnector(factory), pair_id="test")
    return client, pair


def test_frames_flow_both_ways_and_client_close_closes_upstream() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn))
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: pair.upstream.is_open)

        audio = b"\x00\xff" * 4096
        client.feed(Frame.binary(audio))
        client.feed(Frame.text('{"type":"input_audio_buffer.commit"}'))
        conn.feed('{"type":"response.audio.delta"}')
        conn.feed(b"\x01\x02\x03")
        await wait_until(lambda: len(conn.sent) == 2 and len(client.sent) == 2)

        assert conn.sent == [audio, '{"type":"input_audio_buffer.commit"}']
        assert client.sent == [
            Frame.text('{"type":"response.audio.delta"}'),
            Frame.binary(b"\x01\x02\x03"),
        ]

        client.feed_close(1000)
        await asyncio.wait_for(task, timeout=1.0)

        assert pair.state is PairState.CLOSED
        assert conn.close_calls == [(1000, "client closed")]
        assert client.close_calls == []
        assert pair.to_upstream.relayed == 2
        assert pair.to_client.relayed == 2

    asyncio.run(_run())


def test_missing_key_closes_client_with_internal_error() -> None:
    async def _run() -> None:
        factory = FakeConnectFactory(FakeUpstreamConnection())
        client, pair = _pair(factory, _SETTINGS.with_overrides(api_key=""))

        await asyncio.wait_for(pair.run(), timeout=1.0)

        assert factory.calls == []
        assert client.close_calls == [(1011, "missing OPENAI_API_KEY")]
        assert pair.upstream.state is LegState.CLOSED

    asyncio.run(_run())


def test_rejected_handshake_closes_client_with_status_in_reason() -> None:
    async def _run() -> None:
        rejection = InvalidStatus(Response(401, "Unauthorized", Headers(), b""))
        client, pair = _pair(FakeConnectFactory(error=rejection))

        await asyncio.wait_for(pair.run(), timeout=1.0)

        assert len(client.close_calls) == 1
        code, reason = client.close_calls[0]
        assert code == 1011
        assert "401" in reason
        assert pair.coordinator.close_reason == "openai unexpected-response 401"

    asyncio.run(_run())


def test_upstream_clean_close_closes_client_normally() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn))
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: pair.upstream.is_open)

        conn.feed_close(1000, "session ended")
        await asyncio.wait_for(task, timeout=1.0)

        assert client.close_calls == [(1000, "openai closed")]
        assert conn.close_calls == []

    asyncio.run(_run())


def test_upstream_error_closes_client_with_internal_error() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn))
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: pair.upstream.is_open)

        conn.feed_error(ConnectionClosedError(None, None))
        await asyncio.wait_for(task, timeout=1.0)

        assert client.close_calls == [(1011, "openai error")]
        assert pair.upstream.close_code == 1006

    asyncio.run(_run())


def test_client_transport_error_closes_upstream_with_internal_error() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn))
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: pair.upstream.is_open)

        client.feed_error(ConnectionResetError("client connection lost"))
        await asyncio.wait_for(task, timeout=1.0)

        assert conn.close_calls == [(1011, "client error")]

    asyncio.run(_run())


def test_frames_sent_while_upstream_connecting_are_dropped() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn, delay_s=0.05))
        task = asyncio.create_task(pair.run())

        client.feed(Frame.text("too early"))
        await wait_until(lambda: pair.to_upstream.dropped == 1)
        await wait_until(lambda: pair.upstream.is_open)
        client.feed(Frame.text("on time"))
        await wait_until(lambda: len(conn.sent) == 1)

        assert conn.sent == ["on time"]
        client.feed_close(1000)
        await asyncio.wait_for(task, timeout=1.0)

    asyncio.run(_run())


def test_client_close_while_connecting_cancels_the_attempt() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        factory = FakeConnectFactory(conn, delay_s=5.0)
        client, pair = _pair(factory)
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: len(factory.calls) == 1)

        client.feed_close(1000)
        await asyncio.wait_for(task, timeout=1.0)

        assert pair.upstream.state is LegState.CLOSED
        assert conn.close_calls == []
        assert pair.coordinator.close_reason == "client closed"

    asyncio.run(_run())


def test_keepalive_probes_both_legs_while_active() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(
            FakeConnectFactory(conn),
            _SETTINGS.with_overrides(keepalive_interval_s=0.01),
        )
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: conn.pings >= 2 and client.ping_calls >= 2)

        client.feed_close(1000)
        await asyncio.wait_for(task, timeout=1.0)
        pings = conn.pings
        await asyncio.sleep(0.03)

        assert conn.pings == pings
        assert not pair.keepalive.running

    asyncio.run(_run())


def test_registry_shutdown_terminates_live_pairs() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn))
        registry = PairRegistry()
        registry.add(pair)
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: pair.upstream.is_open)

        assert registry.terminate_all("shutdown") == 1
        await asyncio.wait_for(task, timeout=1.0)

        assert conn.transport.aborted
        assert client.abort_calls == 1
        assert client.close_calls == []
        assert conn.close_calls == []
        assert pair.coordinator.forced

    asyncio.run(_run())


def test_cancelling_run_releases_both_legs() -> None:
    async def _run() -> None:
        conn = FakeUpstreamConnection()
        client, pair = _pair(FakeConnectFactory(conn))
        task = asyncio.create_task(pair.run())
        await wait_until(lambda: pair.upstream.is_open)

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

        assert pair.state is PairState.CLOSED
        assert client.state is LegState.CLOSED
        assert conn.transport.aborted

    asyncio.run(_run())


def test_malformed_upstream_url_closes_client_with_internal_error() -> None:
    async def _run() -> None:
        client = FakeLeg("client")
        settings = _SETTINGS.with_overrides(upstream_url="wss://host:abc/realtime")
        pair = ConnectionPair(client, settings, connector=UpstreamConnector(), pair_id="test")

        await asyncio.wait_for(pair.run(), timeout=1.0)

        assert pair.state is PairState.CLOSED
        assert pair.upstream.state is LegState.CLOSED
        assert client.close_calls == [(1011, "openai error")]

    asyncio.run(_run())


def test_unexpected_connector_failure_still_tears_down() -> None:
    class _CrashingConnector(UpstreamConnector):
        async def connect(self, settings: RelaySettings):
            raise KeyError("settings")

    async def _run() -> None:
        client = FakeLeg("client")
        pair = ConnectionPair(client, _SETTINGS, connector=_CrashingConnector(), pair_id="test")

        await asyncio.wait_for(pair.run(), timeout=1.0)

        assert pair.upstream.state is LegState.CLOSED
        assert client.close_calls == [(1011, "openai error")]

    asyncio.run(_run())
