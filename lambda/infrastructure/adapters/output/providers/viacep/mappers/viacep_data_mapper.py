"""
ViaCEP Data Mapper - Transforma o JSON do ViaCEP em Address
LOCALIZAÇÃO: infrastructure (conhece o formato da API externa)
"""
from typing import Any, Dict

from domain.entities.address import Address

ADDRESS_FIELDS = (
    'cep', 'logradouro', 'complemento', 'bairro', 'localidade',
    'uf', 'ibge', 'gia', 'ddd', 'siafi'
)


class ViaCepDataMapper:
    """Mapper ViaCEP → Address"""

    @staticmethod
    def map_to_address(data: Dict[str, Any]) -> Address:
        """
        Mapeia o payload do ViaCEP para Address

        Campos ausentes viram "", campos extras (ex.: 'estado', 'regiao') são ignorados.

        Raises:
            TypeError: Se o payload não for um objeto JSON ou algum campo não for string
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        values = {}
        for name in ADDRESS_FIELDS:
            value = data.get(name, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise TypeError(f"field '{name}' must be a string")
            values[name] = value

        return Address(**values)
