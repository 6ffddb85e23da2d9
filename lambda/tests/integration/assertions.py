"""
Helpers de eventos e assertions para testes de integração
"""
import json
from typing import Any, Dict, Optional


def build_api_gateway_event(
    method: str,
    path: str,
    query_parameters: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway (REST, proxy)

    Args:
        method: HTTP method (GET, DELETE, etc)
        path: Request path (/weather)
        query_parameters: Query string params dict
        headers: Headers extras
    """
    return {
        'resource': path,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            **(headers or {})
        },
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'identity': {'sourceIp': '127.0.0.1'}
        }
    }


def build_weather_event(city: Optional[str], headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Builder para evento GET /weather?city=<city>"""
    return build_api_gateway_event(
        method='GET',
        path='/weather',
        query_parameters={'city': city} if city is not None else None,
        headers=headers
    )


def header_value(response: Dict[str, Any], name: str) -> Optional[str]:
    """
    Lê header da resposta

    AWS Powertools (REST) retorna multiValueHeaders; o handler acrescenta headers simples
    """
    if name in (response.get('headers') or {}):
        return response['headers'][name]
    values = (response.get('multiValueHeaders') or {}).get(name)
    return values[0] if values else None


def json_body(response: Dict[str, Any]) -> Dict[str, Any]:
    return json.loads(response['body'])


def assert_status(response: Dict[str, Any], expected: int):
    """Valida status code e Content-Type JSON"""
    assert response['statusCode'] == expected, \
        f"Expected {expected}, got {response['statusCode']}: {response.get('body')}"
    content_type = header_value(response, 'Content-Type')
    assert content_type == 'application/json', \
        f"Content-Type should be application/json, got {content_type}"


def assert_security_headers(response: Dict[str, Any]):
    assert header_value(response, 'X-Content-Type-Options') == 'nosniff'
    assert header_value(response, 'X-Frame-Options') == 'DENY'
    assert header_value(response, 'Strict-Transport-Security') is not None


def assert_weather_structure(weather: Dict[str, Any]):
    """
    Valida estrutura do WeatherRecord serializado

    Raises:
        AssertionError: Se faltarem campos obrigatórios
    """
    required_fields = ['city', 'country', 'temperature', 'humidity', 'pressure',
                       'description', 'main', 'wind', 'visibility', 'timestamp', 'source']
    for field in required_fields:
        assert field in weather, f"Weather should contain '{field}'"

    for field in ['current', 'feelsLike', 'min', 'max']:
        assert isinstance(weather['temperature'][field], int), f"temperature.{field} should be int"

    assert 0 <= weather['humidity'] <= 100
    assert set(weather['wind']) == {'speed', 'direction'}
