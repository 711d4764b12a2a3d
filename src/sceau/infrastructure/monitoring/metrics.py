"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "sceau_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "sceau_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "sceau_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Session Metrics
# ============================================================

session_checks_total = Counter(
    "sceau_session_checks_total",
    "Authorization guard session checks",
    ["scheme", "outcome"],
)

authentications_total = Counter(
    "sceau_authentications_total",
    "Wallet authentication attempts",
    ["scheme", "outcome"],
)
