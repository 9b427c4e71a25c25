"""
Configurações centralizadas da aplicação
"""
import os

from domain.constants import API


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


# Nomes dos serviços (logger, métricas)
CEP_SERVICE_NAME = os.environ.get('CEP_SERVICE_NAME', 'cep-service')
WEATHER_SERVICE_NAME = os.environ.get('WEATHER_SERVICE_NAME', 'weather-service')

# Provedores externos
VIACEP_BASE_URL = os.environ.get('VIACEP_BASE_URL', API.VIACEP_BASE_URL).rstrip('/')
WEATHERAPI_BASE_URL = os.environ.get('WEATHERAPI_BASE_URL', API.WEATHERAPI_BASE_URL).rstrip('/')
WEATHER_API_KEY = os.environ.get('WEATHER_API_KEY', '')

# weather-service chamado pelo cep-service
WEATHER_SERVICE_URL = os.environ.get('WEATHER_SERVICE_URL', API.WEATHER_SERVICE_URL)

# Prazos (segundos)
REQUEST_TIMEOUT_SECONDS = float(os.environ.get('REQUEST_TIMEOUT_SECONDS', '60'))
SHUTDOWN_GRACE_SECONDS = float(os.environ.get('SHUTDOWN_GRACE_SECONDS', '10'))

# Tracing
CEP_REQUEST_SPAN_NAME = os.environ.get('CEP_REQUEST_SPAN_NAME', 'microservice-cep-request')
WEATHER_FORWARD_SPAN_NAME = os.environ.get('WEATHER_FORWARD_SPAN_NAME', 'microservice-weather-request')
WEATHER_REQUEST_SPAN_NAME = os.environ.get('WEATHER_REQUEST_SPAN_NAME', 'microservice-weather-handler')
LOCALE_SPAN_NAME = os.environ.get('LOCALE_SPAN_NAME', 'microservice-locale-request')
TEMPERATURE_SPAN_NAME = os.environ.get('TEMPERATURE_SPAN_NAME', 'microservice-temperature-request')
# False = variante de span único (etapa de endereço sem span próprio)
TRACE_ADDRESS_STAGE = _env_bool('TRACE_ADDRESS_STAGE', 'true')

# Servidor local
HOST = os.environ.get('HOST', '0.0.0.0')
CEP_SERVICE_PORT = int(os.environ.get('CEP_SERVICE_PORT', '8080'))
WEATHER_SERVICE_PORT = int(os.environ.get('WEATHER_SERVICE_PORT', '8181'))
