"""Prometheus metrics for monitoring score distribution and input quality"""

from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "finhealth_analysis_total",
    "Total health assessments computed",
    ["tier"],  # excellent | good | fair | limited | critical
)

overall_score_histogram = Histogram(
    "finhealth_overall_score",
    "Distribution of overall health scores",
    buckets=[35, 50, 65, 80, 100],
)

degraded_input_counter = Counter(
    "finhealth_degraded_inputs_total",
    "Assessments computed from clamped or degenerate input",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(overall_score: int, tier: str, degraded: bool) -> None:
    """Record assessment metrics for monitoring tier distribution"""
    analysis_counter.labels(tier=tier).inc()
    overall_score_histogram.observe(overall_score)
    if degraded:
        degraded_input_counter.inc()
