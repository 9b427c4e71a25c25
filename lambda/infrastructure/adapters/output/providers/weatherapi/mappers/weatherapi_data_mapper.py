"""
WeatherAPI Data Mapper - Transforma respostas do WeatherAPI em entities
LOCALIZAÇÃO: infrastructure (conhece o formato da API externa)
"""
from typing import Any, Dict, Optional, Tuple

from domain.entities.weather_reading import WeatherReading


class WeatherApiDataMapper:
    """
    Mapper para /v1/current.json

    Formato esperado:
        {"location": {"name": ...}, "current": {"temp_c": ..., "temp_f": ...}}
    Envelope de erro:
        {"error": {"code": ..., "message": ...}}
    """

    @staticmethod
    def map_current_to_reading(data: Dict[str, Any]) -> WeatherReading:
        """
        Raises:
            KeyError: Seção 'location'/'current' ou temperatura ausente
            TypeError: Tipos inesperados
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        location = data['location']
        current = data['current']
        if not isinstance(location, dict) or not isinstance(current, dict):
            raise TypeError("'location' and 'current' must be objects")

        name = location.get('name', "")
        if not isinstance(name, str):
            raise TypeError("location.name must be a string")

        return WeatherReading(
            city=name,
            temp_c=_number(current['temp_c'], 'current.temp_c'),
            temp_f=_number(current['temp_f'], 'current.temp_f')
        )

    @staticmethod
    def map_error_envelope(data: Dict[str, Any]) -> Tuple[str, Optional[int]]:
        """
        Extrai (message, code) do envelope de erro

        Raises:
            KeyError: Se não houver 'error'
            TypeError: Tipos inesperados
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        error = data['error']
        if not isinstance(error, dict):
            raise TypeError("'error' must be an object")

        message = error.get('message', "")
        code = error.get('code')
        if not isinstance(message, str):
            raise TypeError("error.message must be a string")
        if code is not None and (isinstance(code, bool) or not isinstance(code, int)):
            raise TypeError("error.code must be an integer")

        return message, code


def _number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field_name} must be a number")
    return float(value)
