"""Weather Service Client Package"""

from infrastructure.adapters.output.providers.weather_service.weather_service_client import (
    WeatherServiceClient,
    get_weather_service_client
)

__all__ = ['WeatherServiceClient', 'get_weather_service_client']
