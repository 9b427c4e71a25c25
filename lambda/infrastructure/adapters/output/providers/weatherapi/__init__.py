"""WeatherAPI Provider Package"""

from infrastructure.adapters.output.providers.weatherapi.weatherapi_provider import (
    WeatherApiProvider,
    get_weatherapi_provider
)

__all__ = ['WeatherApiProvider', 'get_weatherapi_provider']
