"""
Async Use Case: Get CEP Temperature
Pipeline do weather-service: valida CEP → ViaCEP → WeatherAPI → TemperatureReport
"""
from ddtrace import tracer

from application.ports.input.get_cep_temperature_port import IGetCepTemperatureUseCase
from application.ports.output.address_provider_port import IAddressProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import Messages
from domain.entities.address import Address
from domain.entities.temperature_report import TemperatureReport
from domain.entities.weather_reading import WeatherReading
from domain.exceptions import ProviderException, UpstreamFailureException
from shared.config.logger_config import get_logger
from shared.tracing import stage_span
from shared.utils.validators import CepValidator

logger = get_logger(child=True)


class GetCepTemperatureUseCase(IGetCepTemperatureUseCase):
    """
    Async use case: temperatura atual da cidade de um CEP

    As etapas rodam em sequência (o clima depende da cidade resolvida).
    Cada etapa externa roda dentro de um span; trace_address_stage=False
    desliga o span próprio da etapa de endereço.
    """

    def __init__(
        self,
        address_provider: IAddressProvider,
        weather_provider: IWeatherProvider,
        api_key: str,
        trace_address_stage: bool = True,
        locale_span_name: str = "microservice-locale-request",
        temperature_span_name: str = "microservice-temperature-request"
    ):
        self.address_provider = address_provider
        self.weather_provider = weather_provider
        self.api_key = api_key
        self.trace_address_stage = trace_address_stage
        self.locale_span_name = locale_span_name
        self.temperature_span_name = temperature_span_name

    @tracer.wrap(resource="use_case.get_cep_temperature")
    async def execute(self, cep: str) -> TemperatureReport:
        """
        Execute use case asynchronously

        Raises:
            InvalidCepFormatException: CEP fora do formato
            AddressNotFoundException: CEP inexistente no ViaCEP
            UpstreamFailureException: Falha de transporte/decode/provedor
        """
        CepValidator.validate(cep)

        address = await self._resolve_address(cep)
        reading = await self._resolve_weather(address.city)

        report = TemperatureReport.from_reading(reading)

        logger.info(
            "Temperature resolved",
            cep=cep,
            city=report.city,
            temp_c=report.temp_c
        )
        return report

    async def _resolve_address(self, cep: str) -> Address:
        with stage_span(self.locale_span_name, enabled=self.trace_address_stage):
            try:
                return await self.address_provider.lookup(cep)
            except ProviderException as ex:
                raise UpstreamFailureException(
                    f"{Messages.CEP_INFO_ERROR_PREFIX}{ex}",
                    details={"cep": cep, "provider": self.address_provider.provider_name}
                ) from ex

    async def _resolve_weather(self, city: str) -> WeatherReading:
        with stage_span(self.temperature_span_name):
            try:
                return await self.weather_provider.lookup(city, self.api_key)
            except ProviderException as ex:
                # 500 mesmo quando o provedor rejeita a cidade (comportamento observado)
                raise UpstreamFailureException(
                    f"{Messages.WEATHER_INFO_ERROR_PREFIX}{ex}",
                    details={"city": city, "provider": self.weather_provider.provider_name}
                ) from ex
