"""
Testes Unitários - GetCityWeatherUseCase
Cache-aside: hit não chama provider, miss busca com retry e grava com TTL
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.use_cases.get_city_weather_use_case import GetCityWeatherUseCase
from domain.exceptions import (
    CityNotFoundException,
    InvalidCityException,
    WeatherProviderException
)
from infrastructure.adapters.cache.ttl_cache import TTLCache
from shared.utils.retry_executor import RetryExecutor, RetryOptions


async def no_sleep(seconds):
    return None


@pytest.fixture
def cache(fake_clock):
    return TTLCache(clock=fake_clock)


@pytest.fixture
def weather_provider():
    provider = MagicMock()
    provider.provider_name = "MockProvider"
    provider.fetch_weather = AsyncMock()
    return provider


@pytest.fixture
def use_case(cache, weather_provider):
    return GetCityWeatherUseCase(
        cache=cache,
        weather_provider=weather_provider,
        retry_executor=RetryExecutor(sleep=no_sleep),
        cache_ttl_ms=180000
    )


class TestCacheAside:

    @pytest.mark.asyncio
    async def test_miss_fetches_and_caches(self, use_case, cache, weather_provider, make_weather_record):
        weather = make_weather_record()
        weather_provider.fetch_weather.return_value = weather

        result = await use_case.execute('London')

        assert result is weather
        weather_provider.fetch_weather.assert_awaited_once_with('london')
        assert cache.get('weather:london') is weather

    @pytest.mark.asyncio
    async def test_hit_does_not_call_provider(self, use_case, weather_provider, make_weather_record):
        weather_provider.fetch_weather.return_value = make_weather_record()

        first = await use_case.execute('London')
        second = await use_case.execute('London')

        assert second is first
        assert weather_provider.fetch_weather.await_count == 1

    @pytest.mark.asyncio
    async def test_cache_key_ignores_case_and_whitespace(self, use_case, weather_provider, make_weather_record):
        weather_provider.fetch_weather.return_value = make_weather_record()

        await use_case.execute('London')
        await use_case.execute('  LONDON ')
        await use_case.execute('london')

        assert weather_provider.fetch_weather.await_count == 1

    @pytest.mark.asyncio
    async def test_entry_expires_after_ttl(self, use_case, weather_provider, fake_clock, make_weather_record):
        weather_provider.fetch_weather.side_effect = [
            make_weather_record(current=10),
            make_weather_record(current=20)
        ]

        first = await use_case.execute('London')
        fake_clock.advance(179999)
        cached = await use_case.execute('London')
        fake_clock.advance(1)
        refreshed = await use_case.execute('London')

        assert cached is first
        assert refreshed.temperature.current == 20
        assert weather_provider.fetch_weather.await_count == 2


class TestErrors:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("city", ['', '   ', None])
    async def test_blank_city_raises_invalid_city(self, use_case, weather_provider, city):
        with pytest.raises(InvalidCityException):
            await use_case.execute(city)

        weather_provider.fetch_weather.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transient_failure_is_retried(self, use_case, cache, weather_provider, make_weather_record):
        weather = make_weather_record()
        weather_provider.fetch_weather.side_effect = [
            WeatherProviderException("HTTP 503", status_code=503),
            weather
        ]

        result = await use_case.execute('London')

        assert result is weather
        assert weather_provider.fetch_weather.await_count == 2
        assert cache.get('weather:london') is weather

    @pytest.mark.asyncio
    async def test_city_not_found_propagates_without_retry(self, use_case, cache, weather_provider):
        error = CityNotFoundException("City not found")
        weather_provider.fetch_weather.side_effect = error

        with pytest.raises(CityNotFoundException) as exc_info:
            await use_case.execute('Atlantis')

        assert exc_info.value is error
        assert weather_provider.fetch_weather.await_count == 1
        assert cache.get_stats().total_entries == 0

    @pytest.mark.asyncio
    async def test_exhausted_retries_raise_last_error_and_cache_nothing(self, use_case, cache, weather_provider):
        errors = [WeatherProviderException(f"HTTP {s}", status_code=s) for s in (500, 502, 503)]
        weather_provider.fetch_weather.side_effect = errors

        with pytest.raises(WeatherProviderException) as exc_info:
            await use_case.execute('London')

        assert exc_info.value is errors[-1]
        assert weather_provider.fetch_weather.await_count == 3
        assert cache.get_stats().total_entries == 0


@pytest.mark.asyncio
async def test_retry_options_are_forwarded(cache, weather_provider, make_weather_record):
    retry_executor = MagicMock()
    retry_executor.run = AsyncMock(return_value=make_weather_record())
    options = RetryOptions(max_attempts=5, base_delay=10, max_delay=20)
    use_case = GetCityWeatherUseCase(
        cache=cache,
        weather_provider=weather_provider,
        retry_executor=retry_executor,
        retry_options=options
    )

    await use_case.execute('Paris')

    operation, passed_options = retry_executor.run.await_args.args
    assert passed_options is options
    assert callable(operation)


def test_default_retry_options_for_provider_calls(cache, weather_provider):
    use_case = GetCityWeatherUseCase(
        cache=cache,
        weather_provider=weather_provider,
        retry_executor=RetryExecutor()
    )

    assert use_case.retry_options.max_attempts == 3
    assert use_case.retry_options.base_delay == 1000
    assert use_case.retry_options.max_delay == 8000
    assert use_case.cache_ttl_ms == 180000
