"""Mock Weather Provider - Dados aleatórios plausíveis quando não há API key"""
import random
from typing import Any, Dict, Optional

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import MockWeather
from domain.entities.weather import Temperature, WeatherRecord, Wind

SOURCE_MOCK = "mock"


class MockWeatherProvider(IWeatherProvider):
    """Provider sem rede para desenvolvimento e testes"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    @property
    def provider_name(self) -> str:
        return "Mock"

    async def fetch_weather(self, city: str) -> WeatherRecord:
        rng = self._rng
        temp = rng.choice(MockWeather.TEMPERATURES)
        description = rng.choice(MockWeather.DESCRIPTIONS)

        return WeatherRecord(
            city=city[:1].upper() + city[1:],
            country=MockWeather.COUNTRY,
            temperature=Temperature(
                current=temp,
                feels_like=temp + rng.randint(-1, 1),
                min=temp - 5,
                max=temp + 5
            ),
            humidity=rng.randint(40, 79),
            pressure=rng.randint(1000, 1099),
            description=description,
            main=description.split(' ')[0],
            wind=Wind(speed=rng.randint(1, 10), direction=rng.randint(0, 359)),
            visibility=rng.randint(5000, 9999),
            timestamp=WeatherRecord.now(),
            source=SOURCE_MOCK
        )

    async def check_health(self) -> Dict[str, Any]:
        return {
            'status': 'healthy',
            'message': 'Using mock data (no API key configured)',
            'type': 'mock'
        }
