"""Data models for the benchmarking system."""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Endpoint:
    """A named URL to benchmark. Relative URLs target the local service."""
    name: str
    url: str


@dataclass(frozen=True)
class SampleResult:
    """Outcome of one timed request. latency_ms is NaN when the request raised."""
    latency_ms: float
    success: bool


@dataclass(frozen=True)
class Measurement:
    """Aggregated sampler output: the metric plus attempt and success counts."""
    value: float
    total_requests: int
    successful_responses: int


@dataclass
class BenchmarkData:
    """One row of a benchmark group result."""
    name: str
    value: float
    total_requests: int
    successful_responses: int

    def to_dict(self) -> Dict[str, Any]:
        """Dashboard representation; NaN becomes None so it survives JSON encoding."""
        return {
            "name": self.name,
            "value": None if math.isnan(self.value) else self.value,
            "totalRequests": self.total_requests,
            "successfulResponses": self.successful_responses,
        }


@dataclass
class BenchmarkGroup:
    """A named set of results displayed together."""
    name: str
    unit: str
    data: List[BenchmarkData] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "unit": self.unit,
            "data": [row.to_dict() for row in self.data],
        }


@dataclass(frozen=True)
class GroupDefinition:
    """How a benchmark group is measured."""
    name: str
    unit: str
    kind: str
    endpoints: Tuple[Endpoint, ...]
    samples: Optional[int] = None
    duration_ms: Optional[int] = None
