"""Shared test configuration and fixtures for all tests."""

import math

import httpx
import pytest

from webhook_bench.benchmark import Endpoint, GroupDefinition
from webhook_bench.benchmark.constants import BenchmarkConstants
from webhook_bench.shared.config import Config
from webhook_bench.shared.document_store import DocumentStore
from .test_const import (
    TEST_BASE_URL, TEST_COLLECTION, TEST_DOCUMENT, TEST_DOCUMENT_ID,
    TEST_GROUP_LATENCY, TEST_GROUP_THROUGHPUT,
)


def ok_handler(request: httpx.Request) -> httpx.Response:
    """Transport handler answering every request with 200."""
    return httpx.Response(200, json={"ok": True})


def failing_handler(request: httpx.Request) -> httpx.Response:
    """Transport handler simulating a network failure."""
    raise httpx.ConnectError("connection refused", request=request)


def is_nan(value) -> bool:
    return isinstance(value, float) and math.isnan(value)


@pytest.fixture
def test_config():
    """Config with fast benchmark settings and an in-memory database."""
    return Config(
        local_base_url=TEST_BASE_URL,
        database_url="sqlite://",
        latency_samples=4,
        throughput_duration_ms=50,
        request_timeout=5.0,
    )


@pytest.fixture
def ok_transport():
    return httpx.MockTransport(ok_handler)


@pytest.fixture
def failing_transport():
    return httpx.MockTransport(failing_handler)


@pytest.fixture
def test_groups():
    """Two small groups: a latency group and a throughput group."""
    endpoints = (
        Endpoint("Alpha", "https://alpha.example.com/hook"),
        Endpoint("Local", "/api/test"),
    )
    return (
        GroupDefinition(
            name=TEST_GROUP_LATENCY,
            unit=BenchmarkConstants.LATENCY_UNIT,
            kind=BenchmarkConstants.KIND_LATENCY,
            endpoints=endpoints,
            samples=3,
        ),
        GroupDefinition(
            name=TEST_GROUP_THROUGHPUT,
            unit=BenchmarkConstants.THROUGHPUT_UNIT,
            kind=BenchmarkConstants.KIND_THROUGHPUT,
            endpoints=endpoints,
            duration_ms=30,
        ),
    )


@pytest.fixture
def document_store():
    """Open in-memory document store, closed after the test."""
    store = DocumentStore("sqlite://")
    store.open()
    yield store
    store.close()


@pytest.fixture
def seeded_store(document_store):
    """Document store holding the known test document."""
    document_store.insert_one(TEST_COLLECTION, TEST_DOCUMENT_ID, TEST_DOCUMENT)
    return document_store
