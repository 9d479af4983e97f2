"""Aggregates sample results into benchmark figures."""
import logging
import math
from typing import Sequence

import numpy as np

from .models import SampleResult


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Computes averages, success counts and display values."""

    @staticmethod
    def mean_latency(samples: Sequence[SampleResult], ignore_failed: bool = False) -> float:
        """
        Average the latencies of a batch of samples.

        Args:
            samples: Sample results; failed samples carry a NaN latency.
            ignore_failed: Average only finite latencies instead of letting a
                failed sample turn the whole mean into NaN.

        Returns:
            Mean latency in milliseconds, or NaN when there is nothing to average.
        """
        latencies = np.array([s.latency_ms for s in samples], dtype=float)
        if ignore_failed:
            latencies = latencies[np.isfinite(latencies)]
        if latencies.size == 0:
            return math.nan
        return float(np.mean(latencies))

    @staticmethod
    def count_successes(samples: Sequence[SampleResult]) -> int:
        return sum(1 for s in samples if s.success)

    @staticmethod
    def round_value(value: float) -> float:
        """Round half up to an integer value; NaN and infinities pass through."""
        if not math.isfinite(value):
            return value
        return float(math.floor(value + 0.5))
