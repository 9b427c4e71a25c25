"""
Input Port: Interface para buscar a temperatura de um CEP
"""
from abc import ABC, abstractmethod

from domain.entities.temperature_report import TemperatureReport


class IGetCepTemperatureUseCase(ABC):
    """Interface para casos de uso CEP → TemperatureReport"""

    @abstractmethod
    async def execute(self, cep: str) -> TemperatureReport:
        """
        Resolve a temperatura atual da cidade de um CEP

        Args:
            cep: CEP recebido na requisição

        Returns:
            TemperatureReport

        Raises:
            InvalidCepFormatException: Se o CEP tiver formato inválido
            AddressNotFoundException: Se o CEP não existir
            UpstreamFailureException: Se algum provedor falhar
        """
        pass
