"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
Cada falha vira status HTTP + corpo texto curto
"""
from aws_lambda_powertools.event_handler import Response, content_types
from aws_lambda_powertools.event_handler.exceptions import NotFoundError

from domain.constants import Messages
from domain.exceptions import (
    AddressNotFoundException,
    InvalidCepFormatException,
    MissingCepException,
    ProviderException,
    RequestTimeoutException,
    UpstreamFailureException,
)
from shared.config.logger_config import logger as app_logger


def text_response(status_code: int, message: str) -> Response:
    """Resposta texto puro (mesmo formato para todas as falhas)"""
    return Response(
        status_code=status_code,
        content_type=content_types.TEXT_PLAIN,
        body=message
    )


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas

    Uma instância por resolver: cada serviço loga com o próprio logger.
    """

    def __init__(self, logger=None):
        self.logger = logger or app_logger

    def register(self, app) -> None:
        """Registra os handlers no resolver do Powertools"""
        app.exception_handler(MissingCepException)(self.handle_missing_cep)
        app.exception_handler(InvalidCepFormatException)(self.handle_invalid_cep)
        app.exception_handler(AddressNotFoundException)(self.handle_address_not_found)
        app.exception_handler(UpstreamFailureException)(self.handle_upstream_failure)
        app.exception_handler(ProviderException)(self.handle_provider_error)
        app.exception_handler(RequestTimeoutException)(self.handle_request_timeout)
        app.exception_handler(NotFoundError)(self.handle_route_not_found)
        app.exception_handler(Exception)(self.handle_unexpected_error)

    def handle_missing_cep(self, ex: MissingCepException) -> Response:
        """Handle 400 - CEP ausente ou corpo inválido"""
        self.logger.warning("CEP missing", error=str(ex), details=ex.details)
        return text_response(400, ex.message)

    def handle_invalid_cep(self, ex: InvalidCepFormatException) -> Response:
        """Handle 422 - CEP com formato inválido"""
        self.logger.warning("Invalid CEP format", error=str(ex), details=ex.details)
        return text_response(422, Messages.INVALID_ZIPCODE)

    def handle_address_not_found(self, ex: AddressNotFoundException) -> Response:
        """Handle 404 - CEP inexistente"""
        self.logger.warning("Address not found", error=str(ex), details=ex.details)
        return text_response(404, Messages.ZIPCODE_NOT_FOUND)

    def handle_upstream_failure(self, ex: UpstreamFailureException) -> Response:
        """Handle 500 - Falha em ViaCEP / WeatherAPI / weather-service"""
        self.logger.error(
            "Upstream failure",
            error=str(ex),
            details=ex.details,
            cause=type(ex.__cause__).__name__ if ex.__cause__ else None
        )
        return text_response(500, ex.message)

    def handle_provider_error(self, ex: ProviderException) -> Response:
        """Handle 500 - Erro de provedor que escapou do pipeline"""
        self.logger.error("Provider error", error=str(ex), details=ex.details)
        return text_response(500, ex.message)

    def handle_request_timeout(self, ex: RequestTimeoutException) -> Response:
        """Handle 504 - Prazo da requisição excedido"""
        self.logger.error("Request timed out", error=str(ex), details=ex.details)
        return text_response(504, Messages.REQUEST_TIMEOUT)

    def handle_route_not_found(self, ex: NotFoundError) -> Response:
        """Handle 404 - Rota inexistente"""
        self.logger.warning("Route not found", error=str(ex))
        return text_response(404, Messages.ROUTE_NOT_FOUND)

    def handle_unexpected_error(self, ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        self.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return text_response(500, Messages.INTERNAL_ERROR)
