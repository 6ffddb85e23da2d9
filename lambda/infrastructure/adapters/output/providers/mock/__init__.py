"""Mock Provider Package"""

from infrastructure.adapters.output.providers.mock.mock_weather_provider import MockWeatherProvider

__all__ = ['MockWeatherProvider']
