"""Tests for websocket concurrency and connection lifecycle."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.broadcaster import Broadcaster, _enqueue_message
from server.main import _send_messages_until_disconnect

GSV_VALID = "$GPGSV,1,1,01,05,45,120,38*44"


def test_multiple_clients(client: TestClient) -> None:
    with (
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        client.post("/sentences", json={"sentence": GSV_VALID})
        assert socket_one.receive_json()["type"] == "gsv"
        assert socket_two.receive_json()["type"] == "gsv"


def test_drop_oldest_overflow() -> None:
    message_queue: asyncio.Queue[str] = asyncio.Queue(maxsize=2)
    _enqueue_message(message_queue, "message_one")
    _enqueue_message(message_queue, "message_two")
    _enqueue_message(message_queue, "message_three")
    assert message_queue.qsize() == 2
    assert message_queue.get_nowait() == "message_two"
    assert message_queue.get_nowait() == "message_three"


def test_broadcaster_subscribe_publish_unsubscribe() -> None:
    local = Broadcaster(queue_size=4)
    first = local.subscribe()
    second = local.subscribe()
    local.publish("message")
    assert first.get_nowait() == "message"
    assert second.get_nowait() == "message"
    local.unsubscribe(first)
    local.publish("later")
    assert first.empty()
    assert local.subscriber_count == 1


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch, client: TestClient) -> None:
    monkeypatch.setattr("server.main._TIMEOUT_SECONDS", 0.05)
    with (
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def send_text(self, _text: str) -> None:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        message_queue = MagicMock(spec=asyncio.Queue)
        message_queue.get = AsyncMock(return_value="message")
        websocket = MockWebSocket()
        await _send_messages_until_disconnect(message_queue, websocket)  # type: ignore[arg-type]

    asyncio.run(_run())
