"""
Domain Constants - Constantes da aplicação centralizadas
"""


class API:
    """Constantes de APIs externas"""

    # ViaCEP
    VIACEP_BASE_URL = "http://viacep.com.br"

    # WeatherAPI
    WEATHERAPI_BASE_URL = "http://api.weatherapi.com"
    WEATHERAPI_CURRENT_PATH = "/v1/current.json"

    # Serviço de clima interno (usado pelo cep-service)
    WEATHER_SERVICE_URL = "http://weather:8181"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 60  # segundos (mesmo prazo da requisição de entrada)
    HTTP_TIMEOUT_CONNECT = 5  # segundos
    HTTP_TIMEOUT_READ = 30  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Markers:
    """
    Substrings que os provedores usam para sinalizar falha dentro de um corpo 200.
    A detecção é feita no texto bruto, antes de qualquer decode JSON.
    """

    VIACEP_NOT_FOUND = "erro"
    WEATHERAPI_ERROR = "erro"


class Messages:
    """Textos devolvidos ao cliente"""

    CEP_REQUIRED = "CEP is required"
    CEP_PARAM_REQUIRED = "Cep is required"
    INVALID_ZIPCODE = "invalid zipcode"
    ZIPCODE_NOT_FOUND = "can not find zipcode"
    CEP_INFO_ERROR_PREFIX = "Error getting CEP info: "
    WEATHER_INFO_ERROR_PREFIX = "Error getting weather info: "
    REQUEST_TIMEOUT = "request timed out"
    INTERNAL_ERROR = "Internal server error"
    ROUTE_NOT_FOUND = "Not found"


class Temperature:
    """Constantes de conversão de temperatura"""

    # Offset simplificado usado na resposta (não 273.15)
    KELVIN_OFFSET = 273
