# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics - single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "roster_requests_total",
    "Total HTTP requests to roster panel",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "roster_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "roster_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
ROSTER_MUTATIONS = Counter(
    "roster_mutations_total",
    "Roster mutations by operation and outcome",
    ["operation", "outcome"],
)
ROSTER_ROLLBACKS = Counter(
    "roster_rollbacks_total",
    "Optimistic updates reverted after a store failure",
    ["operation"],
)
ROSTER_REFRESHES = Counter(
    "roster_refreshes_total",
    "Roster fetches by kind and outcome",
    ["kind", "outcome"],
)
ROSTER_AGENTS = Gauge(
    "roster_agents",
    "Agents currently held by the roster controller",
)
ROSTER_AGENTS_ONLINE = Gauge(
    "roster_agents_online",
    "Agents currently marked available",
)
REPORTS_GENERATED = Counter(
    "roster_reports_total",
    "Staffing report generations by outcome",
    ["outcome"],
)
