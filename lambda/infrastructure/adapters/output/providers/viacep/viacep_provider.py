"""
ViaCEP Provider
Resolve CEP → endereço. O "não encontrado" vem como marcador dentro de um corpo 200.
"""
import asyncio
import json
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.address_provider_port import IAddressProvider
from domain.constants import API, Markers, Messages
from domain.entities.address import Address
from domain.exceptions import (
    AddressNotFoundException,
    ProviderDecodeException,
    ProviderTransportException,
)
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from infrastructure.adapters.output.providers.viacep.mappers import ViaCepDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ViaCepProvider(IAddressProvider):
    """Provider de endereços ViaCEP"""

    def __init__(
        self,
        base_url: str = API.VIACEP_BASE_URL,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager or get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @property
    def provider_name(self) -> str:
        return "ViaCEP"

    def build_url(self, cep: str) -> str:
        # CEP vai cru no path (hífen incluído)
        return f"{self.base_url}/ws/{cep}/json/"

    @tracer.wrap(resource="viacep.lookup")
    async def lookup(self, cep: str) -> Address:
        """
        Busca o endereço de um CEP

        Raises:
            AddressNotFoundException: Corpo contém o marcador de erro do ViaCEP
            ProviderTransportException: Falha de rede antes da resposta
            ProviderDecodeException: JSON inválido ou fora do formato
        """
        url = self.build_url(cep)

        try:
            session = await self.session_manager.get_session()
            async with session.get(url) as response:
                status = response.status
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.warning("ViaCEP request failed", cep=cep, error=str(ex))
            raise ProviderTransportException(
                str(ex) or type(ex).__name__,
                details={"cep": cep, "url": url}
            ) from ex

        text = body.decode("utf-8", errors="replace")
        if Markers.VIACEP_NOT_FOUND in text:
            logger.info("ViaCEP returned not-found marker", cep=cep, status=status)
            raise AddressNotFoundException(
                Messages.ZIPCODE_NOT_FOUND,
                details={"cep": cep}
            )

        try:
            address = ViaCepDataMapper.map_to_address(json.loads(body))
        except (ValueError, TypeError) as ex:
            logger.warning("Invalid ViaCEP payload", cep=cep, status=status, error=str(ex))
            raise ProviderDecodeException(
                str(ex),
                details={"cep": cep, "status": status}
            ) from ex

        logger.debug("ViaCEP address resolved", cep=cep, city=address.city)
        return address


# Singleton factory
_viacep_provider_instance: Optional[ViaCepProvider] = None


def get_viacep_provider(base_url: str = API.VIACEP_BASE_URL) -> ViaCepProvider:
    """Retorna instância singleton do provider ViaCEP"""
    global _viacep_provider_instance

    if _viacep_provider_instance is None:
        _viacep_provider_instance = ViaCepProvider(base_url=base_url)

    return _viacep_provider_instance
