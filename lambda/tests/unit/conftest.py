"""
Configurações e fixtures compartilhadas para testes unitários
"""
from datetime import datetime, timezone

import pytest

from domain.entities.weather import Temperature, WeatherRecord, Wind


class FakeClock:
    """Relógio controlável em milissegundos"""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_weather_record():
    """
    Factory fixture para criar WeatherRecord com valores padrão

    Usage:
        def test_something(make_weather_record):
            weather = make_weather_record(city='Paris')
    """
    def _make(
        city: str = 'London',
        country: str = 'GB',
        current: int = 15,
        humidity: int = 72,
        description: str = 'light rain',
        main: str = 'Rain',
        source: str = 'openweathermap'
    ) -> WeatherRecord:
        return WeatherRecord(
            city=city,
            country=country,
            temperature=Temperature(current=current, feels_like=current - 1, min=current - 2, max=current + 2),
            humidity=humidity,
            pressure=1012,
            description=description,
            main=main,
            wind=Wind(speed=4.1, direction=230),
            visibility=10000,
            timestamp=datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc),
            source=source
        )

    return _make
