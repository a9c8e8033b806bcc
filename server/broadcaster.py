"""Fan-out of decoded messages to WebSocket subscriber queues."""

import asyncio
import logging

__all__ = ["Broadcaster"]

logger = logging.getLogger(__name__)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # A slow subscriber loses its oldest message instead of stalling the rest
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Delivers every published message to each subscriber's bounded queue.

    All methods must be called from the event loop thread.

    Args:
        queue_size: Maximum number of undelivered messages per subscriber.
    """

    def __init__(self, queue_size: int) -> None:
        self._queue_size = queue_size
        self._subscribers: list[asyncio.Queue[str]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue[str]:
        """Register a new subscriber and return its queue."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self._queue_size)
        self._subscribers.append(queue)
        logger.info("Subscriber added (%d active)", len(self._subscribers))
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        """Remove a subscriber queue returned by ``subscribe``."""
        self._subscribers.remove(queue)
        logger.info("Subscriber removed (%d active)", len(self._subscribers))

    def publish(self, message: str) -> None:
        """Enqueue ``message`` for every current subscriber."""
        for queue in list(self._subscribers):
            _enqueue_message(queue, message)
