"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de cache, providers e adapters de entrada
"""

from infrastructure.adapters.cache.ttl_cache import TTLCache
from infrastructure.adapters.cache.cache_cleanup_task import CacheCleanupTask
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers import (
    OpenWeatherProvider,
    MockWeatherProvider,
    WeatherProviderFactory
)

__all__ = [
    'TTLCache',
    'CacheCleanupTask',
    'AiohttpSessionManager',
    'OpenWeatherProvider',
    'MockWeatherProvider',
    'WeatherProviderFactory'
]
