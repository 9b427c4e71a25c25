"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas dos provedores externos e adapters HTTP
"""

from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers import (
    ViaCepProvider,
    WeatherApiProvider,
    WeatherServiceClient
)

__all__ = [
    'get_aiohttp_session_manager',
    'ViaCepProvider',
    'WeatherApiProvider',
    'WeatherServiceClient'
]
