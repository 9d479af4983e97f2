"""Unit tests for the throughput sampler."""

import asyncio

import httpx
import pytest

from webhook_bench.benchmark import RequestExecutor, ThroughputSampler
from ..conftest import failing_handler
from ..test_const import TEST_BASE_URL, TEST_EXTERNAL_URL


class FakeClock:
    """Clock that only moves when a request is served."""

    def __init__(self):
        self.now_ms = 0

    def advance(self, ms: int) -> None:
        self.now_ms += ms

    def __call__(self) -> float:
        return self.now_ms / 1000


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=TEST_BASE_URL, transport=httpx.MockTransport(handler))


class TestThroughputSampler:
    """Test sequential, deadline-bounded sampling."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delay_ms,window_ms,expected_ops", [
        (100, 1000, 10),
        (100, 1050, 11),
        (250, 1000, 4),
        (300, 1000, 4),
    ])
    async def test_operations_for_fixed_delay(self, delay_ms, window_ms, expected_ops):
        """With delay D and window W the loop runs until the clock passes W."""
        clock = FakeClock()

        def handler(request):
            clock.advance(delay_ms)
            return httpx.Response(200)

        sampler = ThroughputSampler(RequestExecutor(), clock=clock)
        async with make_client(handler) as client:
            measurement = await sampler.measure(client, TEST_EXTERNAL_URL, window_ms)

        assert measurement.total_requests == expected_ops
        assert abs(measurement.total_requests - window_ms // delay_ms) <= 1
        assert measurement.value == pytest.approx(expected_ops / (window_ms / 1000))
        assert measurement.successful_responses == expected_ops

    @pytest.mark.asyncio
    async def test_in_flight_request_finishes_after_deadline(self):
        """A request that outlives the window still counts."""
        clock = FakeClock()

        def handler(request):
            clock.advance(5000)
            return httpx.Response(200)

        sampler = ThroughputSampler(RequestExecutor(), clock=clock)
        async with make_client(handler) as client:
            measurement = await sampler.measure(client, TEST_EXTERNAL_URL, 1000)

        assert measurement.total_requests == 1
        assert measurement.value == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_requests_are_sequential(self):
        in_flight = {"current": 0, "peak": 0}

        async def handler(request):
            in_flight["current"] += 1
            in_flight["peak"] = max(in_flight["peak"], in_flight["current"])
            await asyncio.sleep(0.01)
            in_flight["current"] -= 1
            return httpx.Response(200)

        sampler = ThroughputSampler(RequestExecutor())
        async with make_client(handler) as client:
            measurement = await sampler.measure(client, TEST_EXTERNAL_URL, 100)

        assert in_flight["peak"] == 1
        assert measurement.total_requests >= 1

    @pytest.mark.asyncio
    async def test_real_clock_fixed_delay(self):
        """Real timing: 20ms per request in a 200ms window gives about 10 operations."""
        async def handler(request):
            await asyncio.sleep(0.02)
            return httpx.Response(200)

        sampler = ThroughputSampler(RequestExecutor())
        async with make_client(handler) as client:
            measurement = await sampler.measure(client, TEST_EXTERNAL_URL, 200)

        assert 3 <= measurement.total_requests <= 11
        assert measurement.value == pytest.approx(measurement.total_requests / 0.2)

    @pytest.mark.asyncio
    async def test_failures_count_as_operations(self):
        clock = FakeClock()

        def handler(request):
            clock.advance(100)
            return failing_handler(request)

        sampler = ThroughputSampler(RequestExecutor(), clock=clock)
        async with make_client(handler) as client:
            measurement = await sampler.measure(client, TEST_EXTERNAL_URL, 500)

        assert measurement.total_requests == 5
        assert measurement.successful_responses == 0
        assert measurement.value == pytest.approx(10.0)

    @pytest.mark.asyncio
    async def test_invalid_duration(self):
        sampler = ThroughputSampler(RequestExecutor())
        async with make_client(lambda request: httpx.Response(200)) as client:
            with pytest.raises(ValueError):
                await sampler.measure(client, TEST_EXTERNAL_URL, 0)
