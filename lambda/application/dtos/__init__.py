"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.responses import (
    CacheStats,
    CacheStatsResponse,
    WeatherResponse
)

__all__ = [
    'CacheStats',
    'CacheStatsResponse',
    'WeatherResponse'
]
