"""
Distributed Tracing helpers (ddtrace)

Usage:
    from shared.tracing import request_span, stage_span, inject_trace_headers

    with request_span("microservice-cep-request", headers=event_headers):
        with stage_span("microservice-locale-request"):
            ...
        headers = inject_trace_headers({})  # propaga o contexto na chamada de saída
"""
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional

from ddtrace import tracer
from ddtrace.propagation.http import HTTPPropagator

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


@contextmanager
def request_span(span_name: str, headers: Optional[Mapping[str, str]] = None, resource: str = None) -> Iterator:
    """
    Abre o span raiz da requisição, continuando o trace recebido nos headers

    O contexto extraído é desativado ao final para não vazar para a próxima
    invocação que reutiliza o mesmo processo.
    """
    context = HTTPPropagator.extract(dict(headers or {}))
    if context.trace_id:
        tracer.context_provider.activate(context)

    try:
        with tracer.trace(span_name, resource=resource or span_name) as span:
            logger.append_keys(trace_id=span.trace_id, span_name=span_name)
            try:
                yield span
            finally:
                logger.remove_keys(['trace_id', 'span_name'])
    finally:
        tracer.context_provider.activate(None)


@contextmanager
def stage_span(span_name: str, enabled: bool = True) -> Iterator:
    """
    Span filho para uma etapa do pipeline (ex.: consulta ao ViaCEP)

    Args:
        span_name: Nome do span
        enabled: Se False, a etapa roda sem span próprio
    """
    if not enabled:
        yield None
        return

    with tracer.trace(span_name, resource=span_name) as span:
        yield span


def inject_trace_headers(headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Injeta o contexto do span ativo nos headers de uma requisição de saída

    Returns:
        O mesmo dict de headers (criado se None)
    """
    if headers is None:
        headers = {}

    span = tracer.current_span()
    if span is not None:
        HTTPPropagator.inject(span.context, headers)

    return headers
