"""
WeatherReading Entity - Leitura de clima atual como informada pelo provedor
"""
from dataclasses import dataclass

from domain.value_objects.temperature import Temperature


@dataclass(frozen=True)
class WeatherReading:
    """Cidade + temperatura em °C e °F (valores do provedor)"""
    city: str
    temp_c: float
    temp_f: float

    @property
    def temperature(self) -> Temperature:
        return Temperature(celsius=self.temp_c, fahrenheit=self.temp_f)
