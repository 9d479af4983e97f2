"""Endpoints and benchmark groups measured by the dashboard."""
from typing import Tuple

from webhook_bench.const import HELLO_ROUTE, READ_DB_ROUTE
from .constants import BenchmarkConstants
from .models import Endpoint, GroupDefinition


API_ENDPOINTS: Tuple[Endpoint, ...] = (
    Endpoint("Albato", "https://h.albato.com/wh/38/1lft158/FoO24OVMUQY5YcCtZerwmfCvguwS1jzQwMdCC3dUFnE"),
    Endpoint("ActivePieces", "https://cloud.activepieces.com/api/v1/webhooks/LAOgyh0liWzE3WkyhiVw6/sync"),
    Endpoint("LateNode", "https://webhook.latenode.com/1150/dev/hello"),
    Endpoint("Yup Code", "https://cloud.yepcode.io/api/rutics/webhooks/test"),
    Endpoint("FastAPI", HELLO_ROUTE),
)

DB_READ_ENDPOINTS: Tuple[Endpoint, ...] = (
    Endpoint("ActivePieces", "https://cloud.activepieces.com/api/v1/webhooks/QmeoqZXcxmwR6MTS6Orv7/sync"),
    Endpoint("LateNode", "https://webhook.latenode.com/1150/dev/hello"),
    Endpoint("Yup Code", "https://cloud.yepcode.io/api/rutics/webhooks/db-read"),
    Endpoint("FastAPI", READ_DB_ROUTE),
)

HELLO_WORLD_LATENCY = "Hello World API Latency(Less is better)"
API_THROUGHPUT = "API Throughput(More is better)"
DB_READ_LATENCY = "Database Read Latency(Less is better)"


def default_groups(
    latency_samples: int = BenchmarkConstants.DEFAULT_LATENCY_SAMPLES,
    throughput_duration_ms: int = BenchmarkConstants.GROUP_THROUGHPUT_DURATION_MS,
) -> Tuple[GroupDefinition, ...]:
    """Build the dashboard's benchmark groups in display order."""
    return (
        GroupDefinition(
            name=HELLO_WORLD_LATENCY,
            unit=BenchmarkConstants.LATENCY_UNIT,
            kind=BenchmarkConstants.KIND_LATENCY,
            endpoints=API_ENDPOINTS,
            samples=latency_samples,
        ),
        GroupDefinition(
            name=API_THROUGHPUT,
            unit=BenchmarkConstants.THROUGHPUT_UNIT,
            kind=BenchmarkConstants.KIND_THROUGHPUT,
            endpoints=API_ENDPOINTS,
            duration_ms=throughput_duration_ms,
        ),
        GroupDefinition(
            name=DB_READ_LATENCY,
            unit=BenchmarkConstants.LATENCY_UNIT,
            kind=BenchmarkConstants.KIND_LATENCY,
            endpoints=DB_READ_ENDPOINTS,
            samples=latency_samples,
        ),
    )
