"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_city_weather_use_case import GetCityWeatherUseCase

__all__ = [
    'GetCityWeatherUseCase'
]
