"""Testes Unitários - WeatherRecord e DTOs de resposta"""
from datetime import datetime

from application.dtos.responses import CacheStats, CacheStatsResponse, WeatherResponse
from domain.entities.weather import WeatherRecord


def test_to_api_response_is_camel_case(make_weather_record):
    data = make_weather_record().to_api_response()

    assert data == {
        'city': 'London',
        'country': 'GB',
        'temperature': {'current': 15, 'feelsLike': 14, 'min': 13, 'max': 17},
        'humidity': 72,
        'pressure': 1012,
        'description': 'light rain',
        'main': 'Rain',
        'wind': {'speed': 4.1, 'direction': 230},
        'visibility': 10000,
        'timestamp': '2025-01-15T12:00:00+00:00',
        'source': 'openweathermap'
    }


def test_naive_timestamp_is_treated_as_utc(make_weather_record):
    weather = make_weather_record()
    weather.timestamp = datetime(2025, 1, 15, 12, 0)

    assert weather.to_api_response()['timestamp'] == '2025-01-15T12:00:00+00:00'


def test_weather_response_envelope(make_weather_record):
    weather = make_weather_record(city='Paris')

    body = WeatherResponse.from_entity(weather).to_api_response()

    assert body['success'] is True
    assert body['data']['city'] == 'Paris'


def test_cache_stats_response_envelope():
    body = CacheStatsResponse(stats=CacheStats(3, 2, 1)).to_api_response()

    assert body == {
        'success': True,
        'data': {'totalEntries': 3, 'validEntries': 2, 'expiredEntries': 1}
    }


def test_now_is_utc():
    assert WeatherRecord.now().tzinfo is not None
