"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from domain.entities.weather import WeatherRecord


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    OpenWeather em produção; provider mock quando não há API key.
    """

    @abstractmethod
    async def fetch_weather(self, city: str) -> WeatherRecord:
        """
        Busca clima atual de uma cidade (uma única tentativa, sem retry)

        Args:
            city: Nome da cidade normalizado

        Returns:
            WeatherRecord normalizado

        Raises:
            CityNotFoundException: Se o provider não conhece a cidade
            WeatherProviderException: Falha HTTP/rede (com status_code/error_code)
        """
        pass

    @abstractmethod
    async def check_health(self) -> Dict[str, Any]:
        """
        Verifica disponibilidade do provider

        Returns:
            Dict com 'status' ('healthy' | 'unhealthy'), 'type' e detalhes
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass
