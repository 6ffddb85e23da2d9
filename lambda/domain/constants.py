"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores default; overrides de ambiente ficam em shared/config/settings.py
"""


class API:
    """Constantes de APIs externas"""

    # OpenWeather (Current Weather Data 2.5)
    OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
    OPENWEATHER_UNITS = "metric"

    # Timeouts HTTP (segundos)
    HTTP_TIMEOUT_TOTAL = 10  # timeout por tentativa, independente do retry
    HTTP_TIMEOUT_CONNECT = 3
    HTTP_TIMEOUT_READ = 8
    HEALTH_CHECK_TIMEOUT = 5
    HEALTH_CHECK_CITY = "London"

    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Cache:
    """Constantes do cache em memória"""

    KEY_PREFIX = "weather:"
    DEFAULT_TTL_MINUTES = 3
    CLEANUP_INTERVAL_SECONDS = 300  # 5 minutos


class Retry:
    """Constantes da política de retry (delays em milissegundos)"""

    MAX_ATTEMPTS = 3
    BASE_DELAY_MS = 1000
    MAX_DELAY_MS = 10000

    # Política usada na chamada ao provider
    PROVIDER_BASE_DELAY_MS = 1000
    PROVIDER_MAX_DELAY_MS = 8000

    # Status HTTP a partir do qual a falha é considerada do servidor
    SERVER_ERROR_STATUS = 500

    # Códigos de erro de rede considerados transitórios
    ERROR_CODE_ABORTED = "ECONNABORTED"
    ERROR_CODE_TIMEOUT = "ETIMEDOUT"
    ERROR_CODE_NOT_FOUND = "ENOTFOUND"
    ERROR_CODE_RESET = "ECONNRESET"
    RETRYABLE_ERROR_CODES = frozenset({
        ERROR_CODE_ABORTED,
        ERROR_CODE_TIMEOUT,
        ERROR_CODE_NOT_FOUND,
        ERROR_CODE_RESET,
    })


class App:
    """Metadados da aplicação"""

    SERVICE_NAME = "weather-cache-api"
    VERSION = "1.0.0"
    ENVIRONMENT = "development"


class MockWeather:
    """Valores usados pelo provider mock (sem API key)"""

    TEMPERATURES = [15, 18, 22, 25, 28, 30, 32, 35]
    DESCRIPTIONS = [
        "clear sky",
        "few clouds",
        "scattered clouds",
        "broken clouds",
        "shower rain",
        "rain",
        "thunderstorm",
        "snow",
    ]
    COUNTRY = "US"
