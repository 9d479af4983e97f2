"""Benchmark package initialization."""
from .models import Endpoint, SampleResult, Measurement, BenchmarkData, BenchmarkGroup, GroupDefinition
from .constants import BenchmarkConstants
from .exceptions import BenchmarkExecutionError, BenchmarkBusyError, UnknownBenchmarkGroupError
from .endpoints import API_ENDPOINTS, DB_READ_ENDPOINTS, default_groups
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer
from .latency_sampler import LatencySampler
from .throughput_sampler import ThroughputSampler
from .result_exporter import ResultExporter
from .dashboard_benchmark import DashboardBenchmark
from .runner import BenchmarkRunner

__all__ = [
    'Endpoint',
    'SampleResult',
    'Measurement',
    'BenchmarkData',
    'BenchmarkGroup',
    'GroupDefinition',
    'BenchmarkConstants',
    'BenchmarkExecutionError',
    'BenchmarkBusyError',
    'UnknownBenchmarkGroupError',
    'API_ENDPOINTS',
    'DB_READ_ENDPOINTS',
    'default_groups',
    'RequestSessionManager',
    'RequestExecutor',
    'LatencyAnalyzer',
    'LatencySampler',
    'ThroughputSampler',
    'ResultExporter',
    'DashboardBenchmark',
    'BenchmarkRunner'
]
