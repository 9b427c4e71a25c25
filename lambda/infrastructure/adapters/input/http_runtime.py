"""
Runtime compartilhado pelos handlers HTTP
Event loop persistente, prazo por requisição e métricas por invocação
"""
import asyncio
import threading
import time
from typing import Any, Awaitable, Callable, Dict, Iterable

from ddtrace import tracer

from domain.exceptions import RequestTimeoutException
from shared.config.logger_config import get_logger
from shared.metrics import observe_request

logger = get_logger(child=True)

# Label único para rotas inexistentes (cardinalidade das métricas limitada)
UNMATCHED_ROUTE = "unmatched"

# =============================
# Global Event Loop (persistente entre invocações, em thread própria)
# =============================
_global_event_loop = None
_loop_lock = threading.Lock()


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    O loop roda em uma thread daemon: requisições atendidas em threads
    diferentes compartilham o mesmo loop e a mesma sessão aiohttp.
    """
    global _global_event_loop

    with _loop_lock:
        if _global_event_loop is not None and not _global_event_loop.is_closed():
            return _global_event_loop

        _global_event_loop = asyncio.new_event_loop()
        thread = threading.Thread(
            target=_global_event_loop.run_forever,
            name="http-runtime-loop",
            daemon=True
        )
        thread.start()

        return _global_event_loop


async def _with_active_span(coro: Awaitable, span):
    # A task nasce com o contexto da thread do loop; reativa o span da requisição
    if span is not None:
        tracer.context_provider.activate(span)
    return await coro


def run_async(coro):
    """
    Executa coroutine no event loop global e bloqueia até o resultado

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    future = asyncio.run_coroutine_threadsafe(_with_active_span(coro, tracer.current_span()), loop)
    return future.result()


async def with_deadline(coro: Awaitable, timeout_seconds: float):
    """
    Aplica o prazo global da requisição ao pipeline inteiro

    Raises:
        RequestTimeoutException: Se o prazo for excedido
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout_seconds)
    except asyncio.TimeoutError as ex:
        raise RequestTimeoutException(
            f"request exceeded {timeout_seconds:g}s",
            details={"timeout_seconds": timeout_seconds}
        ) from ex


def resolve_with_metrics(
    service_name: str,
    resolve: Callable[[Dict[str, Any], Any], Dict[str, Any]],
    event: Dict[str, Any],
    context: Any,
    routes: Iterable[str] = ()
) -> Dict[str, Any]:
    """
    Resolve o evento HTTP registrando log de entrada/saída e métricas

    Args:
        service_name: Nome do serviço (label das métricas)
        resolve: app.resolve do Powertools
        event: Evento API Gateway
        context: Contexto Lambda
        routes: Rotas registradas ("METHOD /path"); as demais viram "unmatched"
    """
    method = event.get('httpMethod', 'N/A')
    path = event.get('path', 'N/A')
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição recebida",
        rota=path,
        metodo=method,
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        x_request_id=headers.get('X-Request-Id', headers.get('x-request-id', 'N/A'))
    )

    start = time.perf_counter()
    response = resolve(event, context)
    duration = time.perf_counter() - start

    status_code = response.get('statusCode', 500)
    route = f"{method} {path}"
    if route not in routes:
        route = UNMATCHED_ROUTE
    observe_request(service_name, route, status_code, duration)

    logger.info(
        "Requisição concluída",
        status_code=status_code,
        duration_ms=round(duration * 1000, 2),
        sucesso=status_code == 200
    )

    return response
