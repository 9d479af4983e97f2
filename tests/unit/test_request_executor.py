"""Unit tests for single request execution."""

import math

import httpx
import pytest

from webhook_bench.benchmark import RequestExecutor, RequestSessionManager
from webhook_bench.benchmark.constants import BenchmarkConstants
from ..conftest import failing_handler, ok_handler
from ..test_const import TEST_BASE_URL, TEST_EXTERNAL_URL, TEST_LOCAL_URL


def make_client(handler) -> httpx.AsyncClient:
    return RequestSessionManager.create_client(
        base_url=TEST_BASE_URL, transport=httpx.MockTransport(handler)
    )


class TestRequestExecutor:
    """Test timing and success inference for one request."""

    @pytest.mark.asyncio
    async def test_successful_request(self):
        executor = RequestExecutor()
        async with make_client(ok_handler) as client:
            result = await executor.send_request(client, TEST_EXTERNAL_URL)

        assert result.success is True
        assert result.latency_ms >= 0
        assert not math.isnan(result.latency_ms)

    @pytest.mark.asyncio
    async def test_error_status_is_timed_but_unsuccessful(self):
        executor = RequestExecutor()
        async with make_client(lambda request: httpx.Response(503)) as client:
            result = await executor.send_request(client, TEST_EXTERNAL_URL)

        assert result.success is False
        assert not math.isnan(result.latency_ms)

    @pytest.mark.asyncio
    async def test_transport_error_yields_nan(self):
        executor = RequestExecutor()
        async with make_client(failing_handler) as client:
            result = await executor.send_request(client, TEST_EXTERNAL_URL)

        assert result.success is False
        assert math.isnan(result.latency_ms)

    @pytest.mark.asyncio
    async def test_unexpected_error_yields_nan(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise OSError("socket closed")

        executor = RequestExecutor()
        async with make_client(handler) as client:
            result = await executor.send_request(client, TEST_EXTERNAL_URL)

        assert result.success is False
        assert math.isnan(result.latency_ms)

    @pytest.mark.asyncio
    async def test_sends_no_cache_headers_and_resolves_relative_urls(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        executor = RequestExecutor()
        async with make_client(handler) as client:
            await executor.send_request(client, TEST_LOCAL_URL)

        assert str(seen[0].url) == f"{TEST_BASE_URL}{TEST_LOCAL_URL}"
        assert seen[0].method == "GET"
        for header, value in BenchmarkConstants.NO_CACHE_HEADERS.items():
            assert seen[0].headers[header] == value

    @pytest.mark.asyncio
    async def test_opaque_mode_only_trusts_same_origin(self):
        executor = RequestExecutor(success_mode="opaque")
        async with make_client(ok_handler) as client:
            external = await executor.send_request(client, TEST_EXTERNAL_URL)
            local = await executor.send_request(client, TEST_LOCAL_URL)

        assert external.success is False
        assert not math.isnan(external.latency_ms)
        assert local.success is True

    def test_unknown_success_mode(self):
        with pytest.raises(ValueError):
            RequestExecutor(success_mode="cors")
