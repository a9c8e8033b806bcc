"""DecodeWorker: background decoding on a thread pool.

``parse_nmea`` is a pure function, so decoding can run on any thread. The
worker only moves sentences to a pool and hands each result back through a
future, an optional callback, or an awaitable. No state is shared between
submissions and results may complete in any order.
"""

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType

from gnssdecode.nmea import NMEAData, parse_nmea

__all__ = ["DecodeWorker"]

logger = logging.getLogger(__name__)

_MAX_WORKERS = 2

DecodeCallback = Callable[[NMEAData | None], None]


class DecodeWorker:
    """Context manager that decodes NMEA sentences on a thread pool.

    Three consumption patterns are supported:

    Task-result handle::

        with DecodeWorker() as worker:
            future = worker.submit(sentence)
            data = future.result()

    Callback delivery (exactly one call per submitted sentence)::

        with DecodeWorker() as worker:
            worker.submit(sentence, callback=handle)

    From a coroutine::

        with DecodeWorker() as worker:
            data = await worker.decode(sentence)

    A decode is never cancelled by the worker. Leaving the ``with`` block
    waits for submitted sentences to finish.

    Args:
        max_workers: Number of decoding threads (default: ``2``).
    """

    def __init__(self, max_workers: int = _MAX_WORKERS) -> None:
        """Store pool parameters; the pool is started in ``__enter__``."""
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None

    def __enter__(self) -> "DecodeWorker":
        """Start the decoding thread pool."""
        self._executor = ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="nmea-decode",
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Wait for pending decodes and stop the thread pool."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _require_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            raise RuntimeError("DecodeWorker must be used as a context manager.")
        return self._executor

    def submit(
        self,
        sentence: str,
        callback: DecodeCallback | None = None,
    ) -> "Future[NMEAData | None]":
        """Queue one sentence for decoding.

        Args:
            sentence: Raw NMEA sentence. Strings are immutable, so the text
                cannot change while it is being decoded.
            callback: Optional function called once with the decode result
                when it is ready.

        Returns:
            A future resolving to the ``NMEAData``, or ``None`` when the
            sentence failed its checksum.

        Raises:
            RuntimeError: If called outside a ``with`` block.
        """
        future = self._require_executor().submit(parse_nmea, sentence)
        if callback is not None:
            future.add_done_callback(lambda done: _deliver(done, callback))
        return future

    async def decode(self, sentence: str) -> NMEAData | None:
        """Decode one sentence on the pool without blocking the event loop.

        Raises:
            RuntimeError: If called outside a ``with`` block.
        """
        executor = self._require_executor()
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, parse_nmea, sentence)


def _deliver(future: "Future[NMEAData | None]", callback: DecodeCallback) -> None:
    # parse_nmea does not raise on bad input; an exception here is a bug
    error = future.exception()
    if error is not None:
        logger.error("Decoding failed", exc_info=error)
        return
    callback(future.result())
