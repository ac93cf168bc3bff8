"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# GraphQL metrics
graphql_operations = Counter(
    'graphql_operations_total',
    'Total GraphQL operations executed',
    ['operation', 'outcome']  # outcome: success, error
)

graphql_latency = Histogram(
    'graphql_operation_latency_seconds',
    'GraphQL operation execution latency',
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

# Auth metrics
auth_attempts = Counter(
    'auth_attempts_total',
    'Login and registration attempts',
    ['action', 'result']  # action: login, register; result: success, rejected
)

# Store metrics
store_operations = Counter(
    'store_operations_total',
    'Document store operations',
    ['collection', 'operation']
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_graphql_operation(operation: str, succeeded: bool, duration_seconds: float):
    outcome = "success" if succeeded else "error"
    graphql_operations.labels(operation=operation, outcome=outcome).inc()
    graphql_latency.observe(duration_seconds)


def record_auth_attempt(action: str, succeeded: bool):
    """Record an auth attempt. Action: login, register"""
    result = "success" if succeeded else "rejected"
    auth_attempts.labels(action=action, result=result).inc()


def record_store_operation(collection: str, operation: str):
    store_operations.labels(collection=collection, operation=operation).inc()
