"""OpenWeather Provider Package"""

from infrastructure.adapters.output.providers.openweather.openweather_provider import (
    OpenWeatherProvider,
    create_openweather_provider
)

__all__ = ['OpenWeatherProvider', 'create_openweather_provider']
