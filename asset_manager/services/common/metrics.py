"""Prometheus RED metrics (rate, errors, duration) of the service's endpoints.

    asset_manager_http_requests_total
        Requests made to an endpoint.

    asset_manager_http_errors_total
        Requests whose handler raised, labelled with the error's `kind`
        (see :mod:`asset_manager.exceptions`) or its class name. Lifecycle
        errors are raised through the tracker before Flask turns them into
        JSON responses, so they are counted here as well.

    asset_manager_http_request_duration_seconds
        Time spent handling a request. Asset requests block until the
        transaction is confirmed, hence the long buckets.

`method` and `path` labels are available for all metrics.
"""
import time

from prometheus_client import Counter, Histogram

HTTP_REQUESTS_TOTAL = Counter(
    "asset_manager_http_requests_total",
    "Total amount of HTTP requests made.",
    labelnames=["method", "path"],
)
HTTP_ERRORS_TOTAL = Counter(
    "asset_manager_http_errors_total",
    "Total amount of HTTP requests whose handler raised an error.",
    labelnames=["method", "path", "kind"],
)
HTTP_REQUEST_DURATION = Histogram(
    "asset_manager_http_request_duration_seconds",
    "Duration of HTTP request processing.",
    labelnames=["method", "path"],
    buckets=(0.05, 0.25, 1, 2.5, 5, 10, 30, 60, 120, 300),
)


class REDMetricsTracker:
    """Count and time a request to `path` while inside the `with` block."""

    def __init__(self, method: str, path: str):
        self.method, self.path = method, path
        self.started = None

    def __enter__(self):
        HTTP_REQUESTS_TOTAL.labels(self.method, self.path).inc()
        self.started = time.monotonic()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None:
            kind = getattr(exc_val, "kind", exc_type.__name__)
            HTTP_ERRORS_TOTAL.labels(self.method, self.path, kind).inc()
        HTTP_REQUEST_DURATION.labels(self.method, self.path).observe(time.monotonic() - self.started)
        return False
