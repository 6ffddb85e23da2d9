"""
Weather Entity - Entidade de domínio que representa dados meteorológicos normalizados
"""
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class Temperature:
    """Temperaturas em °C (inteiros arredondados)"""
    current: int
    feels_like: int
    min: int
    max: int

    def to_api_response(self) -> dict:
        return {
            'current': self.current,
            'feelsLike': self.feels_like,
            'min': self.min,
            'max': self.max
        }


@dataclass
class Wind:
    """Vento: velocidade (m/s) e direção (graus 0-360)"""
    speed: float
    direction: int

    def to_api_response(self) -> dict:
        return {'speed': self.speed, 'direction': self.direction}


@dataclass
class WeatherRecord:
    """Entidade Dados Meteorológicos de uma cidade"""
    city: str
    country: str
    temperature: Temperature
    humidity: int  # %
    pressure: int  # hPa
    description: str  # ex: "light rain"
    main: str  # grupo da condição (ex: "Rain")
    wind: Wind
    visibility: int  # metros
    timestamp: datetime
    source: str  # "openweathermap" | "mock"

    @staticmethod
    def now() -> datetime:
        """Instante atual em UTC (momento da normalização)"""
        return datetime.now(timezone.utc)

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API (camelCase)

        Timestamp sem timezone é tratado como UTC.
        """
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return {
            'city': self.city,
            'country': self.country,
            'temperature': self.temperature.to_api_response(),
            'humidity': self.humidity,
            'pressure': self.pressure,
            'description': self.description,
            'main': self.main,
            'wind': self.wind.to_api_response(),
            'visibility': self.visibility,
            'timestamp': timestamp.isoformat(),
            'source': self.source
        }
