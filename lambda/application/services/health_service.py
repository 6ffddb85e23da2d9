"""
Serviço de health check: status do processo, do cache e do provider de clima
"""
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from application.ports.output.weather_provider_port import IWeatherProvider
from application.services.cache_service import CacheService
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

STATUS_HEALTHY = 'healthy'
STATUS_DEGRADED = 'degraded'


class HealthService:
    """Monta respostas de /health e /health/detailed"""

    def __init__(
        self,
        cache_service: CacheService,
        weather_provider: IWeatherProvider,
        version: str,
        environment: str,
        clock: Callable[[], float] = time.monotonic
    ):
        self.cache_service = cache_service
        self.weather_provider = weather_provider
        self.version = version
        self.environment = environment
        self._clock = clock
        self._started_at = clock()

    def _base_status(self) -> Dict[str, Any]:
        return {
            'status': STATUS_HEALTHY,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'uptime': round(self._clock() - self._started_at, 3),
            'version': self.version,
            'environment': self.environment
        }

    def _cache_status(self) -> Dict[str, Any]:
        try:
            stats = self.cache_service.get_stats()
        except Exception as e:
            logger.error("Cache stats unavailable", error=str(e), exc_info=True)
            return {'status': 'unhealthy', 'error': str(e)}
        return {'status': STATUS_HEALTHY, 'stats': stats.to_api_response()}

    def get_health(self) -> Dict[str, Any]:
        """
        Health check básico

        Status 'degraded' quando as estatísticas do cache não podem ser lidas.
        """
        health = self._base_status()
        health['services'] = {'weather': 'operational', 'cache': 'operational'}

        cache = self._cache_status()
        if cache['status'] == STATUS_HEALTHY:
            health['cache'] = {'status': 'operational', 'stats': cache['stats']}
        else:
            health['cache'] = {'status': STATUS_DEGRADED, 'error': cache['error']}
            health['services']['cache'] = STATUS_DEGRADED
            health['status'] = STATUS_DEGRADED

        return health

    async def get_detailed_health(self) -> Dict[str, Any]:
        """
        Health check com dependências (provider de clima e cache)

        Status 'degraded' quando qualquer dependência não está 'healthy'.
        """
        health = self._base_status()
        health['dependencies'] = {
            'weatherAPI': await self.weather_provider.check_health(),
            'cache': self._cache_status()
        }

        if any(dep.get('status') != STATUS_HEALTHY for dep in health['dependencies'].values()):
            health['status'] = STATUS_DEGRADED

        return health
