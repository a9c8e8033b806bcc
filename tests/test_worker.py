"""Tests for DecodeWorker."""

import asyncio
import threading

import pytest

from gnssdecode import DecodeWorker, NMEAData

RMC_VALID = "$GNRMC,041704.000,A,2935.21718,N,10631.58906,E,0.00,172.39,071124,,,A*7E"
GSV_VALID = "$GPGSV,1,1,01,05,45,120,38*44"


class TestDecodeWorker:
    def test_submit_returns_future_result(self):
        with DecodeWorker() as worker:
            data = worker.submit(RMC_VALID).result(timeout=5)
        assert isinstance(data, NMEAData)
        assert data.rmc is not None

    def test_submit_bad_checksum_resolves_to_none(self):
        with DecodeWorker() as worker:
            assert worker.submit("Invalid NMEA message").result(timeout=5) is None

    def test_callback_called_once_per_sentence(self):
        results: list[NMEAData | None] = []
        lock = threading.Lock()

        def collect(data: NMEAData | None) -> None:
            with lock:
                results.append(data)

        sentences = [RMC_VALID, GSV_VALID, "Invalid NMEA message"] * 5
        with DecodeWorker(max_workers=4) as worker:
            for sentence in sentences:
                worker.submit(sentence, callback=collect)

        assert len(results) == len(sentences)
        assert sum(data is None for data in results) == 5
        assert sum(data is not None and data.gsv is not None for data in results) == 5

    def test_concurrent_results_match_their_sentences(self):
        sentences = [RMC_VALID, GSV_VALID] * 20
        with DecodeWorker(max_workers=4) as worker:
            futures = [worker.submit(sentence) for sentence in sentences]
            results = [future.result(timeout=5) for future in futures]
        assert [data.raw_message for data in results] == sentences

    def test_decode_from_coroutine(self):
        async def _run() -> NMEAData | None:
            with DecodeWorker() as worker:
                return await worker.decode(GSV_VALID)

        data = asyncio.run(_run())
        assert data is not None
        assert data.gsv.satellite_count == 1

    def test_submit_outside_context_raises(self):
        with pytest.raises(RuntimeError):
            DecodeWorker().submit(RMC_VALID)

    def test_decode_after_exit_raises(self):
        worker = DecodeWorker()
        with worker:
            pass

        async def _run() -> None:
            await worker.decode(RMC_VALID)

        with pytest.raises(RuntimeError):
            asyncio.run(_run())
