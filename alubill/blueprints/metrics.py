"""
Prometheus metrics for the billing API.

Request counters, latency and in-flight gauges are recorded by hooks
installed in the app factory; the domain counters are incremented by the
bills and documents blueprints. Served at /metrics, which should only be
reachable from the internal network.
"""
from flask import Blueprint, Response, request, g
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CollectorRegistry, CONTENT_TYPE_LATEST
from prometheus_client import multiprocess, REGISTRY
import time
import os

metrics_bp = Blueprint('metrics', __name__)

# Gunicorn workers share samples through PROMETHEUS_MULTIPROC_DIR
MULTIPROCESS_MODE = os.environ.get('PROMETHEUS_MULTIPROC_DIR') is not None

if MULTIPROCESS_MODE:
    registry = CollectorRegistry()
    multiprocess.MultiProcessCollector(registry)
    # metrics write to the shared directory, not to a registry
    _metric_registry = None
else:
    registry = REGISTRY
    _metric_registry = REGISTRY

LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)

http_requests_total = Counter(
    'http_requests_total', 'Total HTTP requests',
    ['method', 'endpoint', 'http_status'], registry=_metric_registry,
)
http_request_duration_seconds = Histogram(
    'http_request_duration_seconds', 'HTTP request latency in seconds',
    ['method', 'endpoint'], registry=_metric_registry, buckets=LATENCY_BUCKETS,
)
http_requests_in_flight = Gauge(
    'http_requests_in_flight', 'Requests currently being processed',
    registry=_metric_registry,
)

bill_summaries_total = Counter(
    'bill_summaries_total', 'Bill summaries computed',
    registry=_metric_registry,
)
document_numbers_issued_total = Counter(
    'document_numbers_issued_total', 'Next document numbers computed, by series prefix',
    ['prefix'], registry=_metric_registry,
)


def setup_metrics_instrumentation(app):
    """Record request count, latency and in-flight requests for every endpoint."""

    @app.before_request
    def start_request_timer():
        g.request_started_at = time.perf_counter()
        http_requests_in_flight.inc()

    @app.after_request
    def record_request_metrics(response):
        started_at = g.pop('request_started_at', None)
        if started_at is None:
            return response

        # e.g. 'bills.summary'; 404s have no endpoint
        endpoint = request.endpoint or 'unknown'
        try:
            http_request_duration_seconds.labels(request.method, endpoint).observe(time.perf_counter() - started_at)
            http_requests_total.labels(request.method, endpoint, response.status_code).inc()
        except Exception as e:
            app.logger.warning(f"Failed to record metrics: {e}")
        finally:
            http_requests_in_flight.dec()

        return response


@metrics_bp.route('/metrics')
def metrics():
    """Prometheus exposition of the request and billing counters."""
    return Response(generate_latest(registry), mimetype=CONTENT_TYPE_LATEST)
