"""
Prometheus metrics for SDK requests.

Counts every call per catalog endpoint and outcome and records request
latency. Applications expose them with their own ``prometheus_client``
exporter; the SDK only registers and updates the collectors.
"""

from prometheus_client import Counter, Histogram

from kaiascan.utils.config import get_config

OUTCOMES = (
    'success',
    'validation_error',
    'transport_error',
    'decode_error',
    'api_error',
)

requests_total = Counter(
    'kaiascan_requests_total',
    'Total number of Kaiascan API calls.',
    ['endpoint', 'outcome']
)

request_duration_seconds = Histogram(
    'kaiascan_request_duration_seconds',
    'Latency of Kaiascan API calls in seconds.',
    ['endpoint']
)


def record_request(endpoint: str, outcome: str, duration: float = None) -> None:
    """
    Records the outcome of one call.

    Args:
        endpoint (str): Catalog name of the operation.
        outcome (str): One of ``OUTCOMES``.
        duration (float): Seconds spent on the network round trip, if one happened.
    """
    if not get_config().METRICS_ENABLED:
        return
    if outcome not in OUTCOMES:
        raise ValueError(f"Unknown outcome: {outcome}")

    requests_total.labels(endpoint=endpoint, outcome=outcome).inc()
    if duration is not None:
        request_duration_seconds.labels(endpoint=endpoint).observe(duration)
