"""Prometheus metrics for computation volume, health scores and flagged subscriptions"""

from prometheus_client import Counter, Histogram

# Computation metrics
computation_counter = Counter(
    "paycheck_insights_computations_total",
    "Total engine computations served",
    ["kind"],  # dashboard | insights | projection | subscriptions | ghost_cart | item
)

health_score_histogram = Histogram(
    "paycheck_insights_health_score",
    "Distribution of computed financial health scores",
    buckets=[20, 40, 60, 80, 100],
)

score_label_counter = Counter(
    "paycheck_insights_score_label_total",
    "Health scores by display band",
    ["label"],  # strong | okay | risky | critical
)

danger_subscription_counter = Counter(
    "paycheck_insights_danger_subscriptions_total",
    "Subscriptions flagged as danger (unused and costly)",
)

invalid_input_counter = Counter(
    "paycheck_insights_invalid_input_total",
    "Requests rejected for domain-invalid input",
    ["kind"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_computation(kind: str) -> None:
    computation_counter.labels(kind=kind).inc()


def record_health_score(score: float, label: str) -> None:
    """Record score distribution for monitoring how users trend"""
    health_score_histogram.observe(score)
    score_label_counter.labels(label=label).inc()


def record_danger_subscriptions(count: int) -> None:
    if count > 0:
        danger_subscription_counter.inc(count)
