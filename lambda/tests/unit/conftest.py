"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os

# Antes de qualquer import da aplicação (settings / ddtrace leem o ambiente no import)
os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('WEATHER_API_KEY', 'test-api-key')

import pytest
from unittest.mock import AsyncMock, MagicMock


def make_aiohttp_response(body, status: int = 200) -> MagicMock:
    """Resposta aiohttp falsa utilizável em `async with session.get(...)`"""
    if isinstance(body, str):
        body = body.encode('utf-8')

    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=False)
    return response


@pytest.fixture
def make_session_manager():
    """
    Factory fixture para um session manager cujo session.get devolve `body`

    Usage:
        def test_something(make_session_manager):
            manager, session = make_session_manager('{"cep": "01310-100"}')
    """
    def _make(body=b'', status: int = 200, side_effect=None):
        session = MagicMock()
        if side_effect is not None:
            session.get = MagicMock(side_effect=side_effect)
        else:
            session.get = MagicMock(return_value=make_aiohttp_response(body, status))

        manager = MagicMock()
        manager.get_session = AsyncMock(return_value=session)
        return manager, session

    return _make


@pytest.fixture
def viacep_sao_paulo_payload():
    """Resposta real do ViaCEP para 01310-100"""
    return {
        "cep": "01310-100",
        "logradouro": "Avenida Paulista",
        "complemento": "de 612 a 1510 - lado par",
        "unidade": "",
        "bairro": "Bela Vista",
        "localidade": "São Paulo",
        "uf": "SP",
        "estado": "São Paulo",
        "regiao": "Sudeste",
        "ibge": "3550308",
        "gia": "1004",
        "ddd": "11",
        "siafi": "7107"
    }


@pytest.fixture
def weatherapi_sao_paulo_payload():
    """Resposta (reduzida) do WeatherAPI /v1/current.json"""
    return {
        "location": {
            "name": "Sao Paulo",
            "region": "Sao Paulo",
            "country": "Brazil",
            "lat": -23.53,
            "lon": -46.62,
            "tz_id": "America/Sao_Paulo"
        },
        "current": {
            "last_updated": "2026-10-16 14:45",
            "temp_c": 25.0,
            "temp_f": 77.0,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "code": 1003}
        }
    }
