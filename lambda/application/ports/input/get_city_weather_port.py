"""
Input Port: Interface para buscar dados climáticos de uma cidade
"""
from abc import ABC, abstractmethod
from domain.entities.weather import WeatherRecord


class IGetCityWeatherUseCase(ABC):
    """Interface para caso de uso de buscar dados climáticos de uma cidade"""

    @abstractmethod
    async def execute(self, city: str) -> WeatherRecord:
        """
        Busca dados climáticos de uma cidade (cache → provider com retry)

        Args:
            city: Nome da cidade (case e espaços nas bordas são ignorados)

        Returns:
            WeatherRecord: Dados meteorológicos normalizados

        Raises:
            InvalidCityException: Se cidade vazia
        """
        pass
