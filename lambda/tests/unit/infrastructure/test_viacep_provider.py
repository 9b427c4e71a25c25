"""
Unit Tests: ViaCEP Provider
"""
import asyncio
import json

import aiohttp
import pytest

from domain.entities.address import Address
from domain.exceptions import (
    AddressNotFoundException,
    ProviderDecodeException,
    ProviderTransportException,
)
from infrastructure.adapters.output.providers.viacep import ViaCepProvider


class TestViaCepProvider:
    """Test suite for ViaCepProvider"""

    @pytest.mark.asyncio
    async def test_lookup_success(self, make_session_manager, viacep_sao_paulo_payload):
        """Endereço decodificado a partir do JSON do ViaCEP"""
        manager, session = make_session_manager(json.dumps(viacep_sao_paulo_payload))
        provider = ViaCepProvider(base_url="http://viacep.test", session_manager=manager)

        address = await provider.lookup("01310-100")

        assert isinstance(address, Address)
        assert address.cep == "01310-100"
        assert address.city == "São Paulo"
        assert address.uf == "SP"
        assert address.ibge == "3550308"
        assert address.siafi == "7107"

    @pytest.mark.asyncio
    async def test_lookup_keeps_hyphen_in_path(self, make_session_manager, viacep_sao_paulo_payload):
        """O CEP vai cru no path, com hífen"""
        manager, session = make_session_manager(json.dumps(viacep_sao_paulo_payload))
        provider = ViaCepProvider(base_url="http://viacep.test/", session_manager=manager)

        await provider.lookup("01310-100")

        session.get.assert_called_once_with("http://viacep.test/ws/01310-100/json/")

    @pytest.mark.asyncio
    async def test_lookup_not_found_marker(self, make_session_manager):
        """REGRA: corpo com marcador 'erro' → AddressNotFoundException (status 200)"""
        manager, _ = make_session_manager('{\n  "erro": "true"\n}')
        provider = ViaCepProvider(session_manager=manager)

        with pytest.raises(AddressNotFoundException) as exc_info:
            await provider.lookup("00000-000")

        assert str(exc_info.value) == "can not find zipcode"

    @pytest.mark.asyncio
    async def test_marker_checked_before_json_decode(self, make_session_manager):
        """REGRA: marcador vence mesmo em corpo que não é JSON"""
        manager, _ = make_session_manager('<html>erro interno</html>', status=500)
        provider = ViaCepProvider(session_manager=manager)

        with pytest.raises(AddressNotFoundException):
            await provider.lookup("01310-100")

    @pytest.mark.asyncio
    async def test_lookup_invalid_json(self, make_session_manager):
        """Corpo sem marcador e não-JSON → ProviderDecodeException"""
        manager, _ = make_session_manager('<html>Bad Request</html>', status=400)
        provider = ViaCepProvider(session_manager=manager)

        with pytest.raises(ProviderDecodeException) as exc_info:
            await provider.lookup("01310-100")

        assert exc_info.value.details["status"] == 400

    @pytest.mark.asyncio
    async def test_lookup_json_array_is_decode_error(self, make_session_manager):
        """JSON válido mas fora do formato de objeto"""
        manager, _ = make_session_manager('[1, 2, 3]')
        provider = ViaCepProvider(session_manager=manager)

        with pytest.raises(ProviderDecodeException):
            await provider.lookup("01310-100")

    @pytest.mark.asyncio
    async def test_lookup_missing_fields_default_to_empty(self, make_session_manager):
        """Campos ausentes viram string vazia"""
        manager, _ = make_session_manager('{"cep": "01310-100", "localidade": "São Paulo"}')
        provider = ViaCepProvider(session_manager=manager)

        address = await provider.lookup("01310-100")

        assert address.city == "São Paulo"
        assert address.logradouro == ""
        assert address.gia == ""

    @pytest.mark.asyncio
    async def test_lookup_transport_error(self, make_session_manager):
        """Falha de conexão → ProviderTransportException"""
        manager, _ = make_session_manager(side_effect=aiohttp.ClientConnectionError("connection refused"))
        provider = ViaCepProvider(session_manager=manager)

        with pytest.raises(ProviderTransportException) as exc_info:
            await provider.lookup("01310-100")

        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_lookup_timeout_is_transport_error(self, make_session_manager):
        """Timeout do aiohttp também é falha de transporte"""
        manager, _ = make_session_manager(side_effect=asyncio.TimeoutError())
        provider = ViaCepProvider(session_manager=manager)

        with pytest.raises(ProviderTransportException) as exc_info:
            await provider.lookup("01310-100")

        assert str(exc_info.value) == "TimeoutError"

    def test_provider_name(self, make_session_manager):
        manager, _ = make_session_manager()
        assert ViaCepProvider(session_manager=manager).provider_name == "ViaCEP"
