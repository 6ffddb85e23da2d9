"""
Async Use Case: Get City Weather
Cache-aside com TTL: cache → (miss) provider com retry → cache
"""
from typing import Optional

from ddtrace import tracer

from application.ports.input.get_city_weather_port import IGetCityWeatherUseCase
from application.ports.output.cache_repository_port import ICacheRepository
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import Cache, Retry
from domain.entities.weather import WeatherRecord
from shared.config.logger_config import get_logger
from shared.utils.retry_executor import RetryExecutor, RetryOptions
from shared.utils.validators import CityValidator

logger = get_logger(child=True)


class GetCityWeatherUseCase(IGetCityWeatherUseCase):
    """Async use case: Get weather data for a single city"""

    def __init__(
        self,
        cache: ICacheRepository,
        weather_provider: IWeatherProvider,
        retry_executor: RetryExecutor,
        cache_ttl_ms: float = Cache.DEFAULT_TTL_MINUTES * 60 * 1000,
        retry_options: Optional[RetryOptions] = None
    ):
        self.cache = cache
        self.weather_provider = weather_provider
        self.retry_executor = retry_executor
        self.cache_ttl_ms = cache_ttl_ms
        self.retry_options = retry_options or RetryOptions(
            max_attempts=Retry.MAX_ATTEMPTS,
            base_delay=Retry.PROVIDER_BASE_DELAY_MS,
            max_delay=Retry.PROVIDER_MAX_DELAY_MS
        )

    @tracer.wrap(resource="use_case.get_city_weather")
    async def execute(self, city: str) -> WeatherRecord:
        """
        Execute use case asynchronously

        Args:
            city: City name

        Returns:
            WeatherRecord from cache or from the provider

        Raises:
            InvalidCityException: If city is empty
            CityNotFoundException / WeatherProviderException: From the provider,
                unchanged (after retries for transient failures)
        """
        city = CityValidator.validate(city)
        normalized_city = CityValidator.normalize(city)
        cache_key = CityValidator.cache_key(city)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info("Cache hit", city=city, cache_key=cache_key)
            return cached

        logger.info("Cache miss, fetching from provider", city=city, cache_key=cache_key)

        try:
            weather = await self.retry_executor.run(
                lambda: self.weather_provider.fetch_weather(normalized_city),
                self.retry_options
            )
        except Exception as e:
            logger.error(
                "Error fetching weather",
                city=city,
                provider=self.weather_provider.provider_name,
                error=str(e)
            )
            raise

        self.cache.set(cache_key, weather, self.cache_ttl_ms)

        logger.info(
            "Weather fetched successfully",
            city=city,
            provider=self.weather_provider.provider_name,
            ttl_ms=self.cache_ttl_ms
        )

        return weather
