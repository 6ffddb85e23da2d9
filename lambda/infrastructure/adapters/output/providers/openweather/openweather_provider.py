"""OpenWeather Provider - Implementação do provider para OpenWeather Current Weather API 2.5"""
import asyncio
import time
from typing import Any, Dict, Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Retry
from domain.entities.weather import WeatherRecord
from domain.exceptions import CityNotFoundException, WeatherProviderException
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherProvider(IWeatherProvider):
    """
    Provider para OpenWeather Current Weather API

    Características:
    - Uma requisição por chamada (retry fica no RetryExecutor do use case)
    - Timeout próprio por requisição (10s)
    - Erros HTTP/rede convertidos em WeatherProviderException com
      status_code / error_code para o classificador de retry
    - 404 → CityNotFoundException (não faz retry)
    """

    def __init__(
        self,
        api_key: str,
        session_manager: AiohttpSessionManager,
        api_url: str = API.OPENWEATHER_URL,
        request_timeout: float = API.HTTP_TIMEOUT_TOTAL
    ):
        """
        Inicializa provider

        Args:
            api_key: OpenWeather API key
            session_manager: Gerenciador da sessão HTTP compartilhada
            api_url: Endpoint /data/2.5/weather
            request_timeout: Timeout total de cada requisição em segundos

        Raises:
            ValueError: Se API key não configurada
        """
        if not api_key:
            raise ValueError("WEATHER_API_KEY não configurada")

        self.api_key = api_key
        self.api_url = api_url
        self.session_manager = session_manager
        self.request_timeout = aiohttp.ClientTimeout(total=request_timeout)

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @tracer.wrap(resource="openweather.fetch_weather")
    async def fetch_weather(self, city: str) -> WeatherRecord:
        """
        Busca clima atual no OpenWeather

        Args:
            city: Nome da cidade (já normalizado)

        Returns:
            WeatherRecord normalizado

        Raises:
            CityNotFoundException: Cidade desconhecida (404)
            WeatherProviderException: Falha HTTP (status_code) ou de rede (error_code)
        """
        data = await self._get_json(city, self.request_timeout)
        return OpenWeatherDataMapper.map_current_response_to_weather(data)

    async def check_health(self) -> Dict[str, Any]:
        """Requisição de teste com timeout curto"""
        started = time.monotonic()
        try:
            await self._get_json(
                API.HEALTH_CHECK_CITY,
                aiohttp.ClientTimeout(total=API.HEALTH_CHECK_TIMEOUT)
            )
        except Exception as e:
            logger.warning("Weather API health check failed", error=str(e))
            return {'status': 'unhealthy', 'error': str(e), 'type': 'external'}

        return {
            'status': 'healthy',
            'responseTimeMs': round((time.monotonic() - started) * 1000, 1),
            'type': 'external'
        }

    async def _get_json(self, city: str, timeout: aiohttp.ClientTimeout) -> Dict[str, Any]:
        params = {
            'q': city,
            'appid': self.api_key,
            'units': API.OPENWEATHER_UNITS
        }

        session = await self.session_manager.get_session()

        try:
            async with session.get(self.api_url, params=params, timeout=timeout) as response:
                if response.status == 404:
                    raise CityNotFoundException(
                        "City not found. Please check the city name and try again.",
                        details={"city": city}
                    )
                response.raise_for_status()
                return await response.json()

        except aiohttp.ClientResponseError as e:
            raise WeatherProviderException(
                f"Weather API returned HTTP {e.status}",
                status_code=e.status,
                details={"city": city}
            ) from e

        except asyncio.TimeoutError as e:
            raise self._network_error(city, Retry.ERROR_CODE_TIMEOUT, e) from e

        except aiohttp.ClientConnectorError as e:
            raise self._network_error(city, Retry.ERROR_CODE_NOT_FOUND, e) from e

        except (aiohttp.ServerDisconnectedError, aiohttp.ClientOSError) as e:
            raise self._network_error(city, Retry.ERROR_CODE_RESET, e) from e

    @staticmethod
    def _network_error(city: str, error_code: str, cause: Exception) -> WeatherProviderException:
        return WeatherProviderException(
            f"Weather API request failed ({error_code}): {cause}",
            error_code=error_code,
            details={"city": city}
        )


def create_openweather_provider(
    api_key: str,
    session_manager: Optional[AiohttpSessionManager] = None,
    api_url: str = API.OPENWEATHER_URL
) -> OpenWeatherProvider:
    """Factory com sessão própria quando nenhuma é informada"""
    return OpenWeatherProvider(
        api_key=api_key,
        session_manager=session_manager or AiohttpSessionManager(),
        api_url=api_url
    )
