"""Constants for the benchmarking system."""
from typing import Dict


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    DEFAULT_LATENCY_SAMPLES = 10
    DEFAULT_THROUGHPUT_DURATION_MS = 10000
    GROUP_THROUGHPUT_DURATION_MS = 15000
    DEFAULT_TIMEOUT = 30  # seconds
    NO_CACHE_HEADERS: Dict[str, str] = {
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }
    LATENCY_UNIT = "ms"
    THROUGHPUT_UNIT = "req/s"
    KIND_LATENCY = "latency"
    KIND_THROUGHPUT = "throughput"
    GROUP_ERROR_TEMPLATE = "Failed to complete benchmark for {name}. Please try again later."
