"""
Configurações centralizadas da aplicação
Settings.from_env() lê o ambiente e gera um snapshot para injeção
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from domain.constants import API, App, Cache, Retry


def _int_env(name: str, default: int) -> int:
    """Lê inteiro do ambiente; valor ausente ou inválido usa o default"""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _positive_int_env(name: str, default: int) -> int:
    value = _int_env(name, default)
    return value if value > 0 else default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.lower() in ('true', '1', 'yes')


def _list_env(name: str, default: str) -> List[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Snapshot imutável da configuração consumido pelo container da aplicação"""
    weather_api_key: Optional[str] = None
    weather_api_url: str = API.OPENWEATHER_URL
    cache_ttl_minutes: int = Cache.DEFAULT_TTL_MINUTES
    cache_cleanup_interval_seconds: int = Cache.CLEANUP_INTERVAL_SECONDS
    cache_cleanup_enabled: bool = True
    max_retry_attempts: int = Retry.MAX_ATTEMPTS
    allowed_origins: List[str] = field(default_factory=lambda: ['*'])
    environment: str = App.ENVIRONMENT
    app_version: str = App.VERSION

    @property
    def cache_ttl_ms(self) -> int:
        return self.cache_ttl_minutes * 60 * 1000

    @staticmethod
    def from_env() -> 'Settings':
        """Lê o ambiente no momento da chamada (não no import do módulo)"""
        return Settings(
            weather_api_key=os.environ.get('WEATHER_API_KEY') or None,
            weather_api_url=os.environ.get('WEATHER_API_URL', API.OPENWEATHER_URL),
            cache_ttl_minutes=_positive_int_env('CACHE_TTL_MINUTES', Cache.DEFAULT_TTL_MINUTES),
            cache_cleanup_interval_seconds=_positive_int_env(
                'CACHE_CLEANUP_INTERVAL_SECONDS', Cache.CLEANUP_INTERVAL_SECONDS
            ),
            cache_cleanup_enabled=_bool_env('CACHE_CLEANUP_ENABLED', True),
            max_retry_attempts=_positive_int_env('MAX_RETRY_ATTEMPTS', Retry.MAX_ATTEMPTS),
            allowed_origins=_list_env('ALLOWED_ORIGINS', '*'),
            environment=os.environ.get('ENVIRONMENT', App.ENVIRONMENT),
            app_version=os.environ.get('APP_VERSION', App.VERSION)
        )
