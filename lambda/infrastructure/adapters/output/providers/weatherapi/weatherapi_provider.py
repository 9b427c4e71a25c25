"""WeatherAPI Provider - Clima atual por nome de cidade (api.weatherapi.com)"""

import asyncio
import json
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Markers
from domain.entities.weather_reading import WeatherReading
from domain.exceptions import (
    ProviderDecodeException,
    ProviderTransportException,
    WeatherProviderErrorException,
)
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from infrastructure.adapters.output.providers.weatherapi.mappers import WeatherApiDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class WeatherApiProvider(IWeatherProvider):
    """
    Provider para WeatherAPI /v1/current.json

    Características:
    - Erros do provedor chegam como marcador no corpo + envelope {"error": {...}}
    - Sem cache e sem retry
    - 100% async com aiohttp
    """

    def __init__(
        self,
        base_url: str = API.WEATHERAPI_BASE_URL,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager or get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @property
    def provider_name(self) -> str:
        return "WeatherAPI"

    @tracer.wrap(resource="weatherapi.lookup")
    async def lookup(self, city: str, api_key: str) -> WeatherReading:
        """
        Busca o clima atual de uma cidade

        Args:
            city: Nome da cidade (codificado como query param 'q')
            api_key: Chave do WeatherAPI (query param 'key')

        Returns:
            WeatherReading

        Raises:
            WeatherProviderErrorException: Envelope de erro do provedor
            ProviderTransportException: Falha de rede antes da resposta
            ProviderDecodeException: Corpo fora do formato esperado
        """
        url = f"{self.base_url}{API.WEATHERAPI_CURRENT_PATH}"
        params = {"key": api_key, "q": city}

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=params) as response:
                status = response.status
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.warning("WeatherAPI request failed", city=city, error=str(ex))
            raise ProviderTransportException(
                str(ex) or type(ex).__name__,
                details={"city": city}
            ) from ex

        text = body.decode("utf-8", errors="replace")
        if Markers.WEATHERAPI_ERROR in text:
            try:
                message, code = WeatherApiDataMapper.map_error_envelope(json.loads(body))
            except (ValueError, TypeError, KeyError) as ex:
                raise ProviderDecodeException(
                    f"invalid WeatherAPI error payload: {ex}",
                    details={"city": city, "status": status}
                ) from ex

            logger.warning(
                "WeatherAPI returned an error envelope",
                city=city,
                status=status,
                code=code,
                provider_message=message
            )
            raise WeatherProviderErrorException(
                message,
                code=code,
                details={"city": city, "status": status}
            )

        try:
            reading = WeatherApiDataMapper.map_current_to_reading(json.loads(body))
        except (ValueError, TypeError, KeyError) as ex:
            logger.warning("Invalid WeatherAPI payload", city=city, status=status, error=str(ex))
            raise ProviderDecodeException(
                f"invalid WeatherAPI payload: {ex}",
                details={"city": city, "status": status}
            ) from ex

        logger.debug(
            "WeatherAPI reading fetched",
            city=reading.city,
            temp_c=reading.temp_c,
            temp_f=reading.temp_f
        )
        return reading


# Singleton factory
_weatherapi_provider_instance: Optional[WeatherApiProvider] = None


def get_weatherapi_provider(base_url: str = API.WEATHERAPI_BASE_URL) -> WeatherApiProvider:
    """Retorna instância singleton do provider WeatherAPI"""
    global _weatherapi_provider_instance

    if _weatherapi_provider_instance is None:
        _weatherapi_provider_instance = WeatherApiProvider(base_url=base_url)

    return _weatherapi_provider_instance
