"""
Output Port: Address Provider
Contrato para provedores de endereço por CEP (ViaCEP)
"""
from abc import ABC, abstractmethod

from domain.entities.address import Address


class IAddressProvider(ABC):
    """Interface para provedores de endereço"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: ViaCEP)"""
        raise NotImplementedError

    @abstractmethod
    async def lookup(self, cep: str) -> Address:
        """
        Resolve um CEP para um endereço

        Args:
            cep: CEP já validado (hífen preservado)

        Returns:
            Address entity

        Raises:
            AddressNotFoundException: Se o provedor sinalizar CEP inexistente
            ProviderTransportException: Se não houve resposta
            ProviderDecodeException: Se o corpo não puder ser decodificado
        """
        raise NotImplementedError
