"""
Testes para ExceptionHandlerService
Garante cobertura completa do tratamento de exceções
"""
import json

import pytest

from domain.exceptions import (
    CityNotFoundException,
    InvalidCityException,
    WeatherProviderException
)
from infrastructure.adapters.input.exception_handler_service import (
    AVAILABLE_ROUTES,
    ExceptionHandlerService
)


class TestExceptionHandlerService:
    """Testes para o serviço de tratamento de exceções"""

    def test_handle_invalid_city(self):
        """REGRA: InvalidCityException deve retornar 400 com exemplo de uso"""
        ex = InvalidCityException(
            "City parameter is required",
            details={"example": "/weather?city=London"}
        )
        response = ExceptionHandlerService.handle_invalid_city(ex)

        assert response.status_code == 400
        assert response.content_type == "application/json"

        body = json.loads(response.body)
        assert body["type"] == "InvalidCityException"
        assert body["error"] == "Bad Request"
        assert body["message"] == "City parameter is required"
        assert body["example"] == "/weather?city=London"

    def test_handle_city_not_found(self):
        """REGRA: CityNotFoundException deve retornar 404"""
        ex = CityNotFoundException("City not found", details={"city": "atlantis"})
        response = ExceptionHandlerService.handle_city_not_found(ex)

        assert response.status_code == 404

        body = json.loads(response.body)
        assert body["type"] == "CityNotFoundException"
        assert body["error"] == "Not Found"
        assert "check the city name" in body["message"]
        assert body["details"] == {"city": "atlantis"}

    @pytest.mark.parametrize("status", [401, 403])
    def test_handle_provider_auth_failure(self, status):
        """REGRA: credencial inválida no provider vira 500 (não expõe 401 ao cliente)"""
        ex = WeatherProviderException("HTTP 401", status_code=status)
        response = ExceptionHandlerService.handle_weather_provider_error(ex)

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["message"] == "Weather service authentication failed"

    @pytest.mark.parametrize("error_code", ["ETIMEDOUT", "ENOTFOUND", "ECONNRESET", "ECONNABORTED"])
    def test_handle_provider_network_failure(self, error_code):
        """REGRA: timeout / DNS / conexão após retries vira 503"""
        ex = WeatherProviderException("network", error_code=error_code)
        response = ExceptionHandlerService.handle_weather_provider_error(ex)

        assert response.status_code == 503
        body = json.loads(response.body)
        assert body["error"] == "Service Unavailable"

    def test_handle_provider_server_error(self):
        ex = WeatherProviderException("HTTP 502", status_code=502)
        response = ExceptionHandlerService.handle_weather_provider_error(ex)

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["type"] == "WeatherProviderException"
        assert "HTTP 502" not in body["message"]

    def test_handle_value_error(self):
        response = ExceptionHandlerService.handle_value_error(ValueError("Resposta OpenWeather inválida"))

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["type"] == "ValidationError"
        assert body["message"] == "Resposta OpenWeather inválida"

    def test_handle_route_not_found(self):
        response = ExceptionHandlerService.handle_route_not_found("POST", "/weather")

        assert response.status_code == 404
        body = json.loads(response.body)
        assert body["message"] == "Route POST /weather not found"
        assert body["availableRoutes"] == AVAILABLE_ROUTES

    def test_handle_unexpected_error_hides_details(self):
        response = ExceptionHandlerService.handle_unexpected_error(RuntimeError("db password leaked"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error"] == "Internal server error"
        assert "leaked" not in response.body
