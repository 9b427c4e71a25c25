"""
TemperatureReport Entity - Resposta final do pipeline CEP → clima
"""
from dataclasses import dataclass
from typing import Any, Dict

from domain.entities.weather_reading import WeatherReading


@dataclass(frozen=True)
class TemperatureReport:
    """
    Relatório de temperatura

    temp_F é repassado do provedor; temp_K = temp_C + 273.
    """
    city: str
    temp_c: float
    temp_f: float
    temp_k: float

    @classmethod
    def from_reading(cls, reading: WeatherReading) -> 'TemperatureReport':
        """Compõe o relatório a partir de uma leitura do provedor"""
        temperature = reading.temperature
        return cls(
            city=reading.city,
            temp_c=temperature.celsius,
            temp_f=temperature.fahrenheit,
            temp_k=temperature.kelvin
        )

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'TemperatureReport':
        """
        Reconstrói o relatório a partir do JSON devolvido pelo weather-service

        Raises:
            KeyError, TypeError, ValueError: Se o payload não tiver o formato esperado
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        return cls(
            city=str(data['city']),
            temp_c=_as_float(data['temp_C'], 'temp_C'),
            temp_f=_as_float(data['temp_F'], 'temp_F'),
            temp_k=_as_float(data['temp_K'], 'temp_K')
        )

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'city': self.city,
            'temp_C': self.temp_c,
            'temp_F': self.temp_f,
            'temp_K': self.temp_k
        }


def _as_float(value: Any, field_name: str) -> float:
    # bool é subclasse de int, mas não é temperatura
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field_name} must be a number")
    return float(value)
