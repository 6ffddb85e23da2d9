"""
Weather Provider Factory - criação centralizada do provider de clima
"""
from typing import Optional

from application.ports.output.weather_provider_port import IWeatherProvider
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers.mock import MockWeatherProvider
from infrastructure.adapters.output.providers.openweather import create_openweather_provider
from shared.config.settings import Settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class WeatherProviderFactory:
    """
    Factory simples para escolher o provider de clima.
    Com WEATHER_API_KEY → OpenWeather; sem chave → dados mock.
    Lazy-loading: o provider é criado uma vez por factory.
    """

    def __init__(
        self,
        settings: Settings,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        self.settings = settings
        self.session_manager = session_manager
        self._provider: Optional[IWeatherProvider] = None

    def get_weather_provider(self) -> IWeatherProvider:
        """Retorna provider configurado (criado na primeira chamada)"""
        if self._provider is None:
            self._provider = self._create_provider()
        return self._provider

    def _create_provider(self) -> IWeatherProvider:
        if not self.settings.weather_api_key:
            logger.warning("No WEATHER_API_KEY found, using mock data")
            return MockWeatherProvider()

        return create_openweather_provider(
            api_key=self.settings.weather_api_key,
            session_manager=self.session_manager,
            api_url=self.settings.weather_api_url
        )
