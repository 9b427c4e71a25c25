"""
Testes para os helpers de tracing
"""
from unittest.mock import patch

from ddtrace import tracer

from shared.tracing import inject_trace_headers, request_span, stage_span


class TestTracing:
    """Spans da requisição e propagação de contexto"""

    def test_inject_without_active_span(self):
        """Sem span ativo os headers ficam intactos"""
        assert tracer.current_span() is None
        assert inject_trace_headers({"Accept": "application/json"}) == {"Accept": "application/json"}

    def test_inject_with_active_span(self):
        with patch("shared.tracing.HTTPPropagator.inject") as inject:
            with tracer.trace("outbound") as span:
                headers = inject_trace_headers()

        inject.assert_called_once_with(span.context, headers)

    def test_request_span_continues_incoming_trace(self):
        """Trace recebido nos headers vira pai do span da requisição"""
        headers = {
            "x-datadog-trace-id": "1234567890",
            "x-datadog-parent-id": "987654321",
            "x-datadog-sampling-priority": "1"
        }

        with request_span("microservice-cep-request", headers=headers) as span:
            assert span.name == "microservice-cep-request"
            assert span.trace_id % (1 << 64) == 1234567890
            assert span.parent_id == 987654321

        assert tracer.current_span() is None

    def test_stage_span_nested_in_request_span(self):
        with request_span("request") as parent:
            with stage_span("locale") as child:
                assert child.parent_id == parent.span_id
                assert child.trace_id == parent.trace_id

    def test_stage_span_disabled(self):
        with request_span("request") as parent:
            with stage_span("locale", enabled=False) as child:
                assert child is None
                assert tracer.current_span() is parent
