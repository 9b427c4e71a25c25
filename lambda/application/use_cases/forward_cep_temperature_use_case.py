"""
Async Use Case: Forward CEP Temperature
Pipeline do cep-service: valida CEP → ViaCEP → weather-service
"""
from ddtrace import tracer

from application.ports.input.get_cep_temperature_port import IGetCepTemperatureUseCase
from application.ports.output.address_provider_port import IAddressProvider
from application.ports.output.temperature_service_port import ITemperatureService
from domain.constants import Messages
from domain.entities.temperature_report import TemperatureReport
from domain.exceptions import ProviderException, UpstreamFailureException
from shared.config.logger_config import get_logger
from shared.tracing import stage_span
from shared.utils.validators import CepValidator

logger = get_logger(child=True)


class ForwardCepTemperatureUseCase(IGetCepTemperatureUseCase):
    """Async use case: resolve o CEP localmente e delega a temperatura ao weather-service"""

    def __init__(
        self,
        address_provider: IAddressProvider,
        temperature_service: ITemperatureService,
        forward_span_name: str = "microservice-weather-request"
    ):
        self.address_provider = address_provider
        self.temperature_service = temperature_service
        self.forward_span_name = forward_span_name

    @tracer.wrap(resource="use_case.forward_cep_temperature")
    async def execute(self, cep: str) -> TemperatureReport:
        """
        Execute use case asynchronously

        O weather-service recebe o CEP como formatado pelo ViaCEP.

        Raises:
            InvalidCepFormatException: CEP fora do formato
            AddressNotFoundException: CEP inexistente no ViaCEP
            UpstreamFailureException: Falha no ViaCEP ou no weather-service
        """
        CepValidator.validate(cep)

        try:
            address = await self.address_provider.lookup(cep)
        except ProviderException as ex:
            raise UpstreamFailureException(
                f"{Messages.CEP_INFO_ERROR_PREFIX}{ex}",
                details={"cep": cep, "provider": self.address_provider.provider_name}
            ) from ex

        with stage_span(self.forward_span_name):
            try:
                report = await self.temperature_service.get_temperatures(address.cep)
            except ProviderException as ex:
                raise UpstreamFailureException(
                    f"{Messages.WEATHER_INFO_ERROR_PREFIX}{ex}",
                    details={"cep": address.cep}
                ) from ex

        logger.info("Temperature forwarded", cep=cep, city=report.city)
        return report
