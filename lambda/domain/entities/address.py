"""
Address Entity - Endereço resolvido a partir de um CEP (formato ViaCEP)
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Entidade Endereço"""
    cep: str
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""  # Nome da cidade
    uf: str = ""
    ibge: str = ""  # Código IBGE do município
    gia: str = ""
    ddd: str = ""
    siafi: str = ""

    @property
    def city(self) -> str:
        """Nome da cidade usado na consulta de clima"""
        return self.localidade
