"""
Output Port: Temperature Service
Contrato para o weather-service chamado pelo cep-service
"""
from abc import ABC, abstractmethod

from domain.entities.temperature_report import TemperatureReport


class ITemperatureService(ABC):
    """Interface para o serviço que devolve TemperatureReport por CEP"""

    @abstractmethod
    async def get_temperatures(self, cep: str) -> TemperatureReport:
        """
        Raises:
            ProviderTransportException: Se não houve resposta
            ProviderDecodeException: Se a resposta não for um TemperatureReport
        """
        raise NotImplementedError
