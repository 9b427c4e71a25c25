"""
Input Adapter: cep-service (POST /)
Valida o CEP, resolve o endereço no ViaCEP e delega a temperatura ao weather-service
"""
import json
from typing import Any, Optional

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.use_cases.forward_cep_temperature_use_case import ForwardCepTemperatureUseCase

# Domain Layer
from domain.constants import Messages
from domain.exceptions import MissingCepException

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.http_runtime import resolve_with_metrics, run_async, with_deadline
from infrastructure.adapters.output.providers.viacep import get_viacep_provider
from infrastructure.adapters.output.providers.weather_service import get_weather_service_client

# Shared Layer - Utilities
from shared.config import settings
from shared.config.logger_config import get_logger
from shared.metrics import render_metrics
from shared.tracing import request_span
from shared.utils.validators import CepValidator

logger = get_logger(settings.CEP_SERVICE_NAME)

app = APIGatewayRestResolver()

# Rotas registradas (labels de métricas)
ROUTES = frozenset({"POST /", "GET /metrics"})

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService(logger=logger)
exception_service.register(app)


def build_use_case() -> ForwardCepTemperatureUseCase:
    """Monta o use case com os clientes singleton (sessão HTTP compartilhada)"""
    return ForwardCepTemperatureUseCase(
        address_provider=get_viacep_provider(settings.VIACEP_BASE_URL),
        temperature_service=get_weather_service_client(settings.WEATHER_SERVICE_URL),
        forward_span_name=settings.WEATHER_FORWARD_SPAN_NAME
    )


def extract_cep(body: Optional[str]) -> str:
    """
    Extrai o CEP do corpo {"cep": "..."}

    Raises:
        MissingCepException: Corpo ausente, JSON inválido, campo ausente/vazio ou não-string
    """
    try:
        payload: Any = json.loads(body) if body else None
    except ValueError as ex:
        raise MissingCepException(Messages.CEP_REQUIRED, details={"reason": "invalid JSON body"}) from ex

    if not isinstance(payload, dict):
        raise MissingCepException(Messages.CEP_REQUIRED, details={"reason": "body must be a JSON object"})

    cep = CepValidator.require(payload.get("cep"), Messages.CEP_REQUIRED)
    if not isinstance(cep, str):
        raise MissingCepException(Messages.CEP_REQUIRED, details={"reason": "cep must be a string"})

    return cep


# =============================
# Routes
# =============================

@app.post("/")
def post_cep_temperature_route():
    """
    POST /
    Body: { "cep": "01310-100" }

    Returns { "city", "temp_C", "temp_F", "temp_K" } as answered by the weather-service
    """
    with request_span(settings.CEP_REQUEST_SPAN_NAME, headers=app.current_event.headers, resource="POST /"):
        cep = extract_cep(app.current_event.decoded_body)

        use_case = build_use_case()
        report = run_async(with_deadline(use_case.execute(cep), settings.REQUEST_TIMEOUT_SECONDS))

    return report.to_api_response()


@app.get("/metrics")
def metrics_route():
    """GET /metrics - formato de scrape Prometheus"""
    body, content_type = render_metrics()
    return Response(status_code=200, content_type=content_type, body=body)


# =============================
# Lambda Handler
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - cep-service

    Available routes:
    - POST /         Body: {"cep": "01310-100"}
    - GET  /metrics
    """
    return resolve_with_metrics(settings.CEP_SERVICE_NAME, app.resolve, event, context, routes=ROUTES)
