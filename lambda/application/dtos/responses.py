"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass
from typing import Any, Dict

from domain.entities.weather import WeatherRecord


@dataclass(frozen=True)
class CacheStats:
    """
    Estatísticas do cache no instante da chamada

    total_entries == valid_entries + expired_entries (entradas expiradas ainda
    não removidas continuam contadas)
    """
    total_entries: int
    valid_entries: int
    expired_entries: int

    def to_api_response(self) -> Dict[str, int]:
        return {
            'totalEntries': self.total_entries,
            'validEntries': self.valid_entries,
            'expiredEntries': self.expired_entries
        }


@dataclass(frozen=True)
class WeatherResponse:
    """Envelope de sucesso de GET /weather"""
    weather: WeatherRecord

    @staticmethod
    def from_entity(weather: WeatherRecord) -> 'WeatherResponse':
        return WeatherResponse(weather=weather)

    def to_api_response(self) -> Dict[str, Any]:
        return {'success': True, 'data': self.weather.to_api_response()}


@dataclass(frozen=True)
class CacheStatsResponse:
    """Envelope de sucesso de GET /weather/cache/stats"""
    stats: CacheStats

    def to_api_response(self) -> Dict[str, Any]:
        return {'success': True, 'data': self.stats.to_api_response()}
