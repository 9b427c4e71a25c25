"""
Weather Service Client
Chamada do cep-service para o weather-service, propagando o contexto de trace
"""
import asyncio
import json
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.temperature_service_port import ITemperatureService
from domain.constants import API
from domain.entities.temperature_report import TemperatureReport
from domain.exceptions import ProviderDecodeException, ProviderTransportException
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from shared.config.logger_config import get_logger
from shared.tracing import inject_trace_headers

logger = get_logger(child=True)


class WeatherServiceClient(ITemperatureService):
    """Cliente HTTP do weather-service (GET /?cep=...)"""

    def __init__(
        self,
        base_url: str = API.WEATHER_SERVICE_URL,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        self.base_url = base_url
        self.session_manager = session_manager or get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @tracer.wrap(resource="weather_service.get_temperatures")
    async def get_temperatures(self, cep: str) -> TemperatureReport:
        """
        Busca o TemperatureReport de um CEP no weather-service

        O corpo é repassado como veio; qualquer resposta que não seja um
        TemperatureReport (inclusive erros do weather-service) vira decode error.
        """
        headers = inject_trace_headers({"Accept": "application/json"})

        try:
            session = await self.session_manager.get_session()
            async with session.get(self.base_url, params={"cep": cep}, headers=headers) as response:
                status = response.status
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.warning("weather-service request failed", cep=cep, error=str(ex))
            raise ProviderTransportException(
                str(ex) or type(ex).__name__,
                details={"cep": cep, "url": self.base_url}
            ) from ex

        try:
            report = TemperatureReport.from_api_response(json.loads(body))
        except (ValueError, TypeError, KeyError) as ex:
            logger.warning(
                "Unexpected weather-service response",
                cep=cep,
                status=status,
                body=body.decode("utf-8", errors="replace")[:200]
            )
            raise ProviderDecodeException(
                f"invalid weather-service payload: {ex}",
                details={"cep": cep, "status": status}
            ) from ex

        return report


# Singleton factory
_weather_service_client_instance: Optional[WeatherServiceClient] = None


def get_weather_service_client(base_url: str = API.WEATHER_SERVICE_URL) -> WeatherServiceClient:
    """Retorna instância singleton do cliente do weather-service"""
    global _weather_service_client_instance

    if _weather_service_client_instance is None:
        _weather_service_client_instance = WeatherServiceClient(base_url=base_url)

    return _weather_service_client_instance
