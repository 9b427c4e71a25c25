"""
Value Object para temperatura
Encapsula a conversão Celsius → Kelvin usada nas respostas
"""
from dataclasses import dataclass
from typing import Tuple

from domain.constants import Temperature as TemperatureConstants


@dataclass(frozen=True)
class Temperature:
    """
    Value Object para temperatura

    Características:
    - Imutável (frozen=True)
    - Fahrenheit vem do provedor e NÃO é recalculado
    - Kelvin é derivado localmente com offset inteiro (celsius + 273)
    """
    celsius: float
    fahrenheit: float

    @property
    def kelvin(self) -> float:
        """
        Converte para Kelvin

        Returns:
            Temperatura em K (celsius + 273)
        """
        return self.celsius + TemperatureConstants.KELVIN_OFFSET

    @staticmethod
    def convert(temp_c: float, temp_f: float) -> Tuple[float, float]:
        """
        Retorna (temp_F, temp_K) para uma leitura do provedor

        Args:
            temp_c: Temperatura em °C informada pelo provedor
            temp_f: Temperatura em °F informada pelo provedor (repassada)

        Returns:
            Tupla (fahrenheit, kelvin)
        """
        temperature = Temperature(celsius=temp_c, fahrenheit=temp_f)
        return temperature.fahrenheit, temperature.kelvin
