"""
Input Adapter: weather-service (GET /?cep=...)
Pipeline completo CEP → ViaCEP → WeatherAPI → TemperatureReport
"""
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.use_cases.get_cep_temperature_use_case import GetCepTemperatureUseCase

# Domain Layer
from domain.constants import Messages

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.http_runtime import resolve_with_metrics, run_async, with_deadline
from infrastructure.adapters.output.providers.viacep import get_viacep_provider
from infrastructure.adapters.output.providers.weatherapi import get_weatherapi_provider

# Shared Layer - Utilities
from shared.config import settings
from shared.config.logger_config import get_logger
from shared.metrics import render_metrics
from shared.tracing import request_span
from shared.utils.validators import CepValidator

logger = get_logger(settings.WEATHER_SERVICE_NAME)

app = APIGatewayRestResolver()

# Rotas registradas (labels de métricas)
ROUTES = frozenset({"GET /", "GET /metrics"})

exception_service = ExceptionHandlerService(logger=logger)
exception_service.register(app)


def build_use_case() -> GetCepTemperatureUseCase:
    """Monta o use case com os providers singleton (sessão HTTP compartilhada)"""
    return GetCepTemperatureUseCase(
        address_provider=get_viacep_provider(settings.VIACEP_BASE_URL),
        weather_provider=get_weatherapi_provider(settings.WEATHERAPI_BASE_URL),
        api_key=settings.WEATHER_API_KEY,
        trace_address_stage=settings.TRACE_ADDRESS_STAGE,
        locale_span_name=settings.LOCALE_SPAN_NAME,
        temperature_span_name=settings.TEMPERATURE_SPAN_NAME
    )


@app.get("/")
def get_temperature_route():
    """
    GET /?cep=01310-100

    400 se o parâmetro estiver vazio, 422 se o formato for inválido,
    404 se o CEP não existir, 500 para falhas de provedores.
    """
    with request_span(settings.WEATHER_REQUEST_SPAN_NAME, headers=app.current_event.headers, resource="GET /"):
        cep = CepValidator.require(
            app.current_event.get_query_string_value(name="cep", default_value=""),
            Messages.CEP_PARAM_REQUIRED
        )

        use_case = build_use_case()
        report = run_async(with_deadline(use_case.execute(cep), settings.REQUEST_TIMEOUT_SECONDS))

    return report.to_api_response()


@app.get("/metrics")
def metrics_route():
    """GET /metrics - formato de scrape Prometheus"""
    body, content_type = render_metrics()
    return Response(status_code=200, content_type=content_type, body=body)


@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - weather-service

    Available routes:
    - GET /?cep=01310-100
    - GET /metrics
    """
    return resolve_with_metrics(settings.WEATHER_SERVICE_NAME, app.resolve, event, context, routes=ROUTES)
