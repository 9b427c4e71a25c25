"""
Helpers de assertions para testes de integração
"""
import json
from typing import Any, Dict, Optional


def response_content_type(response: Dict[str, Any]) -> Optional[str]:
    """AWS Powertools pode retornar headers ou multiValueHeaders"""
    if 'multiValueHeaders' in response:
        return (response['multiValueHeaders'].get('Content-Type') or [None])[0]
    if 'headers' in response:
        return response['headers'].get('Content-Type')
    return None


def assert_200_ok(response: Dict[str, Any], expected_content_type: str = 'application/json'):
    """
    Valida resposta 200 OK

    Raises:
        AssertionError: Se a resposta não for 200 ou não tiver estrutura correta
    """
    assert response['statusCode'] == 200, f"Expected 200, got {response['statusCode']}: {response.get('body')}"
    assert 'body' in response, "Response should have body"

    content_type = response_content_type(response)
    assert content_type is not None and content_type.startswith(expected_content_type), \
        f"Content-Type should be {expected_content_type}, got {content_type}"


def assert_text_error(response: Dict[str, Any], status_code: int, message: str):
    """
    Valida resposta de erro: status + corpo texto curto

    Raises:
        AssertionError: Se status ou corpo divergirem
    """
    assert response['statusCode'] == status_code, \
        f"Expected {status_code}, got {response['statusCode']}: {response.get('body')}"
    assert response['body'] == message, f"Expected body {message!r}, got {response['body']!r}"
    assert response_content_type(response) == 'text/plain'


def assert_temperature_structure(body: Dict[str, Any], city: str):
    """
    Valida o relatório {city, temp_C, temp_F, temp_K}

    Raises:
        AssertionError: Se campos faltarem ou K != C + 273
    """
    assert set(body) == {'city', 'temp_C', 'temp_F', 'temp_K'}, f"Unexpected fields: {sorted(body)}"
    assert body['city'] == city
    for field in ('temp_C', 'temp_F', 'temp_K'):
        assert isinstance(body[field], (int, float)), f"{field} should be numeric"
    assert body['temp_K'] == body['temp_C'] + 273


def parse_json_body(response: Dict[str, Any]) -> Dict[str, Any]:
    return json.loads(response['body'])
