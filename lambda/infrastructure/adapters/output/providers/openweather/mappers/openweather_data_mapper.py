"""
OpenWeather Data Mapper - Transforma dados da API OpenWeather para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
import math
from datetime import datetime
from typing import Any, Dict, Optional

from domain.entities.weather import Temperature, WeatherRecord, Wind

SOURCE_OPENWEATHER = "openweathermap"


class OpenWeatherDataMapper:
    """
    Mapper para transformar respostas da API OpenWeather em entities de domínio

    Responsabilidade: Traduzir formato OpenWeather → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_current_response_to_weather(
        data: Dict[str, Any],
        fetched_at: Optional[datetime] = None
    ) -> WeatherRecord:
        """
        Mapeia resposta /data/2.5/weather para WeatherRecord

        Temperaturas são arredondadas para inteiro.

        Args:
            data: Resposta raw da API OpenWeather
            fetched_at: Instante da normalização (padrão: agora em UTC)

        Returns:
            WeatherRecord normalizado

        Raises:
            ValueError: Se a resposta não tem os blocos obrigatórios
        """
        try:
            main = data['main']
            condition = data['weather'][0]
            sys_info = data.get('sys', {})
            wind = data.get('wind', {})
        except (KeyError, IndexError, TypeError) as e:
            raise ValueError(f"Resposta OpenWeather inválida: {e}") from e

        return WeatherRecord(
            city=data.get('name', ''),
            country=sys_info.get('country', ''),
            temperature=Temperature(
                current=OpenWeatherDataMapper._round(main.get('temp')),
                feels_like=OpenWeatherDataMapper._round(main.get('feels_like')),
                min=OpenWeatherDataMapper._round(main.get('temp_min')),
                max=OpenWeatherDataMapper._round(main.get('temp_max'))
            ),
            humidity=main.get('humidity', 0),
            pressure=main.get('pressure', 0),
            description=condition.get('description', ''),
            main=condition.get('main', ''),
            wind=Wind(
                speed=wind.get('speed', 0.0),
                direction=wind.get('deg', 0)
            ),
            visibility=data.get('visibility', 0),
            timestamp=fetched_at or WeatherRecord.now(),
            source=SOURCE_OPENWEATHER
        )

    @staticmethod
    def _round(value: Optional[float]) -> int:
        # meio arredonda para cima (2.5 → 3, -2.5 → -2)
        if value is None:
            return 0
        return math.floor(value + 0.5)
