"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidCityException(DomainException):
    """Raised when the city parameter is missing or blank"""
    pass


class CityNotFoundException(DomainException):
    """Raised when the weather provider does not know the city"""
    pass


class WeatherProviderException(DomainException):
    """
    Raised when the upstream weather provider fails

    Carries the HTTP status (status_code) and/or the network error code
    (error_code, e.g. ETIMEDOUT) used by the retry classifier.
    """
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: dict = None
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.error_code = error_code
