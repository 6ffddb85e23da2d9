"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from typing import Any, Dict, List

from aws_lambda_powertools.event_handler import Response, content_types

from domain.constants import Retry
from domain.exceptions import (
    CityNotFoundException,
    InvalidCityException,
    WeatherProviderException,
)
from shared.config.logger_config import logger as app_logger

AVAILABLE_ROUTES: List[str] = [
    'GET /',
    'GET /health',
    'GET /health/detailed',
    'GET /weather?city=<city_name>',
    'GET /weather/cache/stats',
    'DELETE /weather/cache'
]

_AUTH_FAILURE_STATUS = (401, 403)


def json_response(status_code: int, body: Dict[str, Any]) -> Response:
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body)
    )


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_invalid_city(ex: InvalidCityException) -> Response:
        """Handle 400 - City parameter missing or blank"""
        ExceptionHandlerService.logger.warning("Invalid city", error=str(ex), details=ex.details)
        body = {
            "type": "InvalidCityException",
            "error": "Bad Request",
            "message": str(ex),
            "details": ex.details
        }
        if "example" in ex.details:
            body["example"] = ex.details["example"]
        return json_response(400, body)

    @staticmethod
    def handle_city_not_found(ex: CityNotFoundException) -> Response:
        """Handle 404 - City unknown to the weather provider"""
        ExceptionHandlerService.logger.warning("City not found", error=str(ex), details=ex.details)
        return json_response(404, {
            "type": "CityNotFoundException",
            "error": "Not Found",
            "message": "City not found. Please check the city name and try again.",
            "details": ex.details
        })

    @staticmethod
    def handle_weather_provider_error(ex: WeatherProviderException) -> Response:
        """
        Handle falhas do provider (após retries)

        - 401/403 → 500 (credencial do serviço inválida)
        - Timeout / DNS / conexão → 503
        - Demais → 500
        """
        ExceptionHandlerService.logger.error(
            "Weather provider error",
            error=str(ex),
            status_code=ex.status_code,
            error_code=ex.error_code,
            details=ex.details,
            exc_info=True
        )

        if ex.status_code in _AUTH_FAILURE_STATUS:
            return json_response(500, {
                "type": "WeatherProviderException",
                "error": "Internal Server Error",
                "message": "Weather service authentication failed"
            })

        if ex.error_code in Retry.RETRYABLE_ERROR_CODES:
            return json_response(503, {
                "type": "WeatherProviderException",
                "error": "Service Unavailable",
                "message": "Weather service is temporarily unavailable. Please try again later."
            })

        return json_response(500, {
            "type": "WeatherProviderException",
            "error": "Internal Server Error",
            "message": "An unexpected error occurred while fetching weather data"
        })

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return json_response(400, {
            "type": "ValidationError",
            "error": "Validation error",
            "message": str(ex)
        })

    @staticmethod
    def handle_route_not_found(method: str, path: str) -> Response:
        """Handle 404 - Rota inexistente"""
        ExceptionHandlerService.logger.warning("Route not found", method=method, path=path)
        return json_response(404, {
            "error": "Not Found",
            "message": f"Route {method} {path} not found",
            "availableRoutes": AVAILABLE_ROUTES
        })

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return json_response(500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        })
