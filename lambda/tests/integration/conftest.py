"""
Fixtures compartilhadas para testes de integração
Os handlers rodam de ponta a ponta; só a rede (sessão aiohttp) é simulada
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('WEATHER_API_KEY', 'test-api-key')

import pytest
from unittest.mock import AsyncMock, patch

from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager

from events import FakeUpstream, MockContext


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


@pytest.fixture
def upstream():
    """Substitui a sessão HTTP compartilhada por um FakeUpstream"""
    fake = FakeUpstream()
    with patch.object(AiohttpSessionManager, 'get_session', AsyncMock(return_value=fake)):
        yield fake


@pytest.fixture
def viacep_sao_paulo_payload():
    """Resposta do ViaCEP para 01310-100"""
    return {
        "cep": "01310-100",
        "logradouro": "Avenida Paulista",
        "complemento": "de 612 a 1510 - lado par",
        "bairro": "Bela Vista",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308",
        "gia": "1004",
        "ddd": "11",
        "siafi": "7107"
    }


@pytest.fixture
def weatherapi_sao_paulo_payload():
    """Resposta (reduzida) do WeatherAPI /v1/current.json"""
    return {
        "location": {"name": "Sao Paulo", "region": "Sao Paulo", "country": "Brazil"},
        "current": {"temp_c": 25.0, "temp_f": 77.0, "condition": {"text": "Partly cloudy"}}
    }
