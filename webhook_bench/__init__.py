"""Webhook Bench: latency and throughput benchmarks for webhook endpoints."""

__version__ = "0.1.0"
