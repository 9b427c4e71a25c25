"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .address_provider_port import IAddressProvider
from .weather_provider_port import IWeatherProvider
from .temperature_service_port import ITemperatureService

__all__ = ['IAddressProvider', 'IWeatherProvider', 'ITemperatureService']
