"""
Prometheus metrics: lifecycle events prepared, transitions rejected, unmapped routing lookups (HTTP boundary).
"""
from prometheus_client import Counter, generate_latest

events_prepared_total = Counter(
    "order_events_prepared_total",
    "Total lifecycle events validated, built and routed",
    ["event_kind"],
)
transitions_rejected_total = Counter(
    "order_transitions_rejected_total",
    "Total status changes rejected by the order state machine",
    ["current_status", "attempted_status"],
)
routing_unmapped_total = Counter(
    "order_routing_unmapped_total",
    "Total routing lookups for a status with no mapped destination",
)
requests_failed_total = Counter(
    "order_lifecycle_requests_failed_total",
    "Total requests answered with a failure, by error code",
    ["error_code"],
)


def get_metrics_content_type():
    return "text/plain; charset=utf-8; version=0.0.4"


def get_metrics_bytes():
    return generate_latest()
