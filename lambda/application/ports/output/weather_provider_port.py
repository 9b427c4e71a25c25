"""Weather Provider Port - Interface para provedores de clima atual"""
from abc import ABC, abstractmethod

from domain.entities.weather_reading import WeatherReading


class IWeatherProvider(ABC):
    """Interface para provedores de dados meteorológicos por nome de cidade"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    async def lookup(self, city: str, api_key: str) -> WeatherReading:
        """
        Busca o clima atual de uma cidade

        Args:
            city: Nome da cidade (será codificado na query string)
            api_key: Chave de acesso ao provedor

        Returns:
            WeatherReading com °C e °F do provedor

        Raises:
            WeatherProviderErrorException: Se o provedor devolver envelope de erro
            ProviderTransportException: Se não houve resposta
            ProviderDecodeException: Se o corpo não puder ser decodificado
        """
        raise NotImplementedError
