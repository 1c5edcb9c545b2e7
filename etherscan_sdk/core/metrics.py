"""Prometheus metrics for outbound Etherscan requests."""

from prometheus_client import Counter, Histogram

# --- Metrics ---

REQUEST_COUNT = Counter(
    "etherscan_requests_total",
    "Total outbound Etherscan API requests",
    ["method", "status"],
)

REQUEST_DURATION = Histogram(
    "etherscan_request_duration_seconds",
    "Outbound Etherscan request duration in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30, 60],
)

ADMISSION_WAIT = Histogram(
    "etherscan_admission_wait_seconds",
    "Time a call spent queued before rate-limit admission",
    buckets=[0.001, 0.01, 0.1, 0.25, 0.5, 1, 2.5, 5, 10],
)


def observe_request(method: str, status: str, duration: float) -> None:
    """Record the terminal outcome of a single dispatched call."""
    REQUEST_COUNT.labels(method=method, status=status).inc()
    REQUEST_DURATION.labels(method=method).observe(duration)
