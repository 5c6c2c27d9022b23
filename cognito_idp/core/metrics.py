"""Prometheus self-metrics for the plugin run."""

from shared.metrics import get_counter, get_gauge, get_histogram

_SERVICE = "cognito_idp_plugin"

FETCH_REQUESTS = get_counter(
    "fetch_requests_total", "Total CloudWatch metric statistics requests", _SERVICE
)
FETCH_FAILURES = get_counter(
    "fetch_failures_total",
    "Metric fetches skipped, by failure reason",
    _SERVICE,
    labelnames=("reason",),
)
FETCH_LATENCY = get_histogram(
    "fetch_latency_seconds", "Time spent in a single CloudWatch request", _SERVICE
)
SNAPSHOT_SIZE = get_gauge(
    "snapshot_metrics", "Number of metrics present in the last snapshot", _SERVICE
)
