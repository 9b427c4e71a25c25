"""
Métricas Prometheus expostas em GET /metrics
"""
from typing import Tuple

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUESTS_TOTAL = Counter(
    'cep_requests_total',
    'Requisições HTTP atendidas',
    ['service', 'route', 'status']
)

REQUEST_DURATION_SECONDS = Histogram(
    'cep_request_duration_seconds',
    'Duração das requisições HTTP',
    ['service', 'route']
)


def observe_request(service: str, route: str, status: int, duration_seconds: float) -> None:
    """Registra uma requisição concluída"""
    REQUESTS_TOTAL.labels(service=service, route=route, status=str(status)).inc()
    REQUEST_DURATION_SECONDS.labels(service=service, route=route).observe(duration_seconds)


def render_metrics() -> Tuple[str, str]:
    """
    Returns:
        Tupla (body no formato de scrape, content type)
    """
    return generate_latest().decode('utf-8'), CONTENT_TYPE_LATEST
