"""
Application Container - Composition root
Cria uma única instância de cada colaborador por processo e injeta nas camadas
"""
from typing import Optional

from application.ports.output.weather_provider_port import IWeatherProvider
from application.services.cache_service import CacheService
from application.services.health_service import HealthService
from application.use_cases.get_city_weather_use_case import GetCityWeatherUseCase
from domain.constants import Retry
from infrastructure.adapters.cache.cache_cleanup_task import CacheCleanupTask
from infrastructure.adapters.cache.ttl_cache import TTLCache
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory
from shared.config.logger_config import get_logger
from shared.config.settings import Settings
from shared.utils.retry_executor import RetryExecutor, RetryOptions

logger = get_logger(child=True)


class ApplicationContainer:
    """
    Ciclo de vida:
        container = ApplicationContainer(Settings.from_env())
        await container.start()     # agenda limpeza periódica do cache
        ...
        await container.shutdown()  # para a limpeza e fecha a sessão HTTP
    """

    def __init__(
        self,
        settings: Settings,
        cache: Optional[TTLCache] = None,
        weather_provider: Optional[IWeatherProvider] = None,
        retry_executor: Optional[RetryExecutor] = None
    ):
        self.settings = settings
        self.cache = cache or TTLCache()
        self.session_manager = AiohttpSessionManager()
        self.weather_provider = weather_provider or WeatherProviderFactory(
            settings=settings,
            session_manager=self.session_manager
        ).get_weather_provider()
        self.retry_executor = retry_executor or RetryExecutor()

        self.cleanup_task = CacheCleanupTask(
            cache=self.cache,
            interval_seconds=settings.cache_cleanup_interval_seconds
        )
        self.cache_service = CacheService(self.cache)
        self.health_service = HealthService(
            cache_service=self.cache_service,
            weather_provider=self.weather_provider,
            version=settings.app_version,
            environment=settings.environment
        )
        self.get_city_weather = GetCityWeatherUseCase(
            cache=self.cache,
            weather_provider=self.weather_provider,
            retry_executor=self.retry_executor,
            cache_ttl_ms=settings.cache_ttl_ms,
            retry_options=RetryOptions(
                max_attempts=settings.max_retry_attempts,
                base_delay=Retry.PROVIDER_BASE_DELAY_MS,
                max_delay=Retry.PROVIDER_MAX_DELAY_MS
            )
        )

        logger.info(
            "Application container initialized",
            provider=self.weather_provider.provider_name,
            cache_ttl_minutes=settings.cache_ttl_minutes,
            max_retry_attempts=settings.max_retry_attempts
        )

    async def start(self) -> None:
        """Inicia a limpeza periódica (se habilitada) no event loop corrente"""
        if self.settings.cache_cleanup_enabled:
            self.cleanup_task.start()

    async def shutdown(self) -> None:
        """Para a limpeza periódica e libera a sessão HTTP"""
        await self.cleanup_task.stop()
        await self.session_manager.close()
        logger.info("Application container shut down")
