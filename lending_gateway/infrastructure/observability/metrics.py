"""Prometheus metrics for monitoring risk distribution and pricing outcomes"""

from prometheus_client import Counter, Histogram

# Pricing metrics
pricing_counter = Counter(
    "lending_pricing_total",
    "Total loan pricing evaluations",
    ["category"],  # A+ | A | B+ | B | C
)

risk_score_histogram = Histogram(
    "lending_risk_score",
    "Distribution of computed risk scores",
    buckets=[20, 40, 60, 70, 80, 90, 100],
)

loan_amount_bucket_counter = Counter(
    "lending_loan_amount_bucket",
    "Priced loan amounts by bucket",
    ["bucket"],  # <=25k, 25k-100k, 100k-250k, 250k+
)

rejected_request_counter = Counter(
    "lending_rejected_requests_total",
    "Loan requests rejected before pricing",
    ["reason"],  # OutOfBounds | InvalidArgument
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_pricing(category_code: str, risk_score: int, amount: int) -> None:
    """Record pricing metrics for monitoring the risk mix of incoming demand"""
    pricing_counter.labels(category=category_code).inc()
    risk_score_histogram.observe(risk_score)

    # Bucket amounts for distribution analysis
    if amount <= 25_000:
        bucket = "<=25k"
    elif amount <= 100_000:
        bucket = "25k-100k"
    elif amount <= 250_000:
        bucket = "100k-250k"
    else:
        bucket = "250k+"

    loan_amount_bucket_counter.labels(bucket=bucket).inc()
