"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Any, Type

from domain.constants import Cache
from domain.exceptions import InvalidCityException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_not_empty(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida se valor é string não vazia

        Args:
            value: Valor a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            String validada e trimmed

        Raises:
            exception_class: Se valor não for string ou estiver vazio
        """
        if not isinstance(value, str) or not value.strip():
            raise exception_class(f"{param_name} is required and must be a non-empty string")
        return value.strip()


class CityValidator:
    """Validate and normalize city name parameter"""

    @staticmethod
    def validate(city: Any) -> str:
        """
        Validate city name

        Returns:
            The trimmed city name (case preserved)

        Raises:
            InvalidCityException: If city is missing, not a string or blank
        """
        try:
            return GenericValidator.validate_not_empty(city, "City name", InvalidCityException)
        except InvalidCityException as ex:
            ex.details = {"city": city if isinstance(city, str) else None, "example": "/weather?city=London"}
            raise

    @staticmethod
    def normalize(city: str) -> str:
        """Lowercase + trim (base da chave de cache)"""
        return city.strip().lower()

    @staticmethod
    def cache_key(city: str) -> str:
        """Chave de cache: "weather:" + lowercase(trim(city))"""
        return f"{Cache.KEY_PREFIX}{CityValidator.normalize(city)}"
