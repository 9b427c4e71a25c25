"""Infrastructure Providers - Implementações dos provedores externos"""

from infrastructure.adapters.output.providers.viacep import ViaCepProvider, get_viacep_provider
from infrastructure.adapters.output.providers.weatherapi import WeatherApiProvider, get_weatherapi_provider
from infrastructure.adapters.output.providers.weather_service import (
    WeatherServiceClient,
    get_weather_service_client
)

__all__ = [
    'ViaCepProvider',
    'get_viacep_provider',
    'WeatherApiProvider',
    'get_weatherapi_provider',
    'WeatherServiceClient',
    'get_weather_service_client'
]
