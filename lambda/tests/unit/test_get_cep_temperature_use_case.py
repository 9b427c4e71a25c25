"""
Testes Unitários - GetCepTemperatureUseCase (weather-service)
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from application.use_cases.get_cep_temperature_use_case import GetCepTemperatureUseCase
from domain.entities.address import Address
from domain.entities.temperature_report import TemperatureReport
from domain.entities.weather_reading import WeatherReading
from domain.exceptions import (
    AddressNotFoundException,
    InvalidCepFormatException,
    ProviderTransportException,
    UpstreamFailureException,
    WeatherProviderErrorException,
)
from shared import tracing


@pytest.fixture
def address_provider():
    provider = MagicMock()
    provider.provider_name = "ViaCEP"
    provider.lookup = AsyncMock(return_value=Address(cep="01310-100", localidade="São Paulo", uf="SP"))
    return provider


@pytest.fixture
def weather_provider():
    provider = MagicMock()
    provider.provider_name = "WeatherAPI"
    provider.lookup = AsyncMock(return_value=WeatherReading(city="São Paulo", temp_c=25.0, temp_f=77.0))
    return provider


@pytest.fixture
def use_case(address_provider, weather_provider):
    return GetCepTemperatureUseCase(
        address_provider=address_provider,
        weather_provider=weather_provider,
        api_key="test-api-key"
    )


class TestGetCepTemperatureUseCase:
    """Pipeline CEP → endereço → clima → relatório"""

    @pytest.mark.asyncio
    async def test_success(self, use_case, address_provider, weather_provider):
        report = await use_case.execute("01310-100")

        assert report == TemperatureReport(city="São Paulo", temp_c=25.0, temp_f=77.0, temp_k=298.0)
        address_provider.lookup.assert_awaited_once_with("01310-100")
        weather_provider.lookup.assert_awaited_once_with("São Paulo", "test-api-key")

    @pytest.mark.asyncio
    async def test_city_comes_from_address(self, use_case, address_provider, weather_provider):
        """Cidade consultada = localidade do ViaCEP, mesmo se o WeatherAPI responder outro nome"""
        address_provider.lookup.return_value = Address(cep="20040-020", localidade="Rio de Janeiro")
        weather_provider.lookup.return_value = WeatherReading(city="Rio De Janeiro", temp_c=30.0, temp_f=86.0)

        report = await use_case.execute("20040020")

        weather_provider.lookup.assert_awaited_once_with("Rio de Janeiro", "test-api-key")
        assert report.city == "Rio De Janeiro"
        assert report.temp_k == 303.0

    @pytest.mark.asyncio
    async def test_invalid_cep_skips_providers(self, use_case, address_provider, weather_provider):
        with pytest.raises(InvalidCepFormatException):
            await use_case.execute("0131-100")

        address_provider.lookup.assert_not_awaited()
        weather_provider.lookup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_address_not_found_propagates(self, use_case, address_provider, weather_provider):
        """404 não é convertido em falha de upstream"""
        address_provider.lookup.side_effect = AddressNotFoundException("can not find zipcode")

        with pytest.raises(AddressNotFoundException):
            await use_case.execute("99999-999")

        weather_provider.lookup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_address_transport_failure(self, use_case, address_provider, weather_provider):
        address_provider.lookup.side_effect = ProviderTransportException("connection refused")

        with pytest.raises(UpstreamFailureException) as exc_info:
            await use_case.execute("01310-100")

        assert exc_info.value.message == "Error getting CEP info: connection refused"
        assert isinstance(exc_info.value.__cause__, ProviderTransportException)
        weather_provider.lookup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_weather_provider_error(self, use_case, weather_provider):
        """Envelope de erro do WeatherAPI vira 500 com a mensagem do provedor"""
        weather_provider.lookup.side_effect = WeatherProviderErrorException(
            "No matching location found.", code=1006
        )

        with pytest.raises(UpstreamFailureException) as exc_info:
            await use_case.execute("01310-100")

        assert exc_info.value.message == "Error getting weather info: No matching location found."
        assert isinstance(exc_info.value.__cause__, WeatherProviderErrorException)
        assert exc_info.value.__cause__.code == 1006

    @pytest.mark.asyncio
    async def test_address_stage_span_can_be_disabled(self, address_provider, weather_provider):
        """Variante de span único: só a etapa de clima abre span próprio"""
        use_case = GetCepTemperatureUseCase(
            address_provider=address_provider,
            weather_provider=weather_provider,
            api_key="test-api-key",
            trace_address_stage=False
        )

        with patch("application.use_cases.get_cep_temperature_use_case.stage_span",
                   wraps=tracing.stage_span) as stage_span:
            await use_case.execute("01310-100")

        calls = [(c.args[0], c.kwargs.get("enabled", True)) for c in stage_span.call_args_list]
        assert calls == [
            ("microservice-locale-request", False),
            ("microservice-temperature-request", True),
        ]
