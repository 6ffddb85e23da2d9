"""Infrastructure Providers - Implementações de provedores climáticos"""

from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider
from infrastructure.adapters.output.providers.mock import MockWeatherProvider
from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory

__all__ = ['OpenWeatherProvider', 'MockWeatherProvider', 'WeatherProviderFactory']
