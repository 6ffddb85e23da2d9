"""
Input Adapter: rotas HTTP da Weather Cache API (API Gateway REST → Powertools)
Cada rota delega ao ApplicationContainer; coroutines rodam no event loop global
"""
import asyncio
import threading

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.utilities.typing import LambdaContext

from application.dtos.responses import CacheStatsResponse, WeatherResponse

from domain.exceptions import (
    CityNotFoundException,
    InvalidCityException,
    WeatherProviderException
)

from infrastructure.adapters.input.exception_handler_service import (
    AVAILABLE_ROUTES,
    ExceptionHandlerService,
    json_response
)
from infrastructure.container import ApplicationContainer

from shared.config.logger_config import get_logger
from shared.config.settings import Settings

logger = get_logger()

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'Referrer-Policy': 'no-referrer',
    'Strict-Transport-Security': 'max-age=15552000; includeSubDomains'
}

settings = Settings.from_env()

app = APIGatewayRestResolver(
    cors=CORSConfig(
        allow_origin=settings.allowed_origins[0],
        extra_origins=settings.allowed_origins[1:],
        allow_headers=['Content-Type', 'Authorization']
    )
)

# Um event loop e um container por processo (reaproveitados em warm starts)
_global_event_loop = None
_loop_thread = None
_started = False
_lifecycle_lock = threading.Lock()

container = ApplicationContainer(settings)

# Exceção → resposta HTTP
exception_service = ExceptionHandlerService()

app.exception_handler(InvalidCityException)(exception_service.handle_invalid_city)
app.exception_handler(CityNotFoundException)(exception_service.handle_city_not_found)
app.exception_handler(WeatherProviderException)(exception_service.handle_weather_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


@app.not_found
def route_not_found(ex: NotFoundError):
    return exception_service.handle_route_not_found(
        method=app.current_event.http_method,
        path=app.current_event.path
    )


@app.get("/")
def root_route():
    """GET / - Service info"""
    return {
        'message': 'Weather Cache API',
        'version': settings.app_version,
        'endpoints': {
            'health': '/health',
            'weather': '/weather?city=<city_name>',
            'cacheStats': '/weather/cache/stats',
            'clearCache': 'DELETE /weather/cache'
        }
    }


@app.get("/weather")
def get_weather_route():
    """
    GET /weather?city=London

    Returns normalized weather data for a city (cached with TTL)
    """
    city = app.current_event.get_query_string_value(name="city", default_value=None)
    if not city:
        raise InvalidCityException(
            "City parameter is required",
            details={"example": "/weather?city=London"}
        )

    weather = run_async(container.get_city_weather.execute(city))

    return WeatherResponse.from_entity(weather).to_api_response()


@app.get("/weather/cache/stats")
def get_cache_stats_route():
    """GET /weather/cache/stats"""
    stats = container.cache_service.get_stats()
    return CacheStatsResponse(stats=stats).to_api_response()


@app.delete("/weather/cache")
def clear_cache_route():
    """DELETE /weather/cache"""
    container.cache_service.clear()
    return {'success': True, 'message': 'Cache cleared successfully'}


@app.get("/health")
def health_route():
    """GET /health - Basic health check"""
    return container.health_service.get_health()


@app.get("/health/detailed")
def detailed_health_route():
    """GET /health/detailed - 200 quando saudável, 503 quando degradado"""
    health = run_async(container.health_service.get_detailed_health())
    status_code = 200 if health['status'] == 'healthy' else 503
    return json_response(status_code, health)


@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """Entry point: inicia o container na primeira chamada, resolve a rota e anexa headers de segurança"""
    ensure_started()

    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        user_agent=headers.get('User-Agent', 'N/A')
    )

    response = app.resolve(event, context)

    if 'headers' not in response:
        response['headers'] = {}
    response['headers'].update(SECURITY_HEADERS)

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Event loop do processo, rodando em uma thread daemon (run_forever)

    A sessão aiohttp e a task de limpeza do cache vivem nele; como o loop não
    depende de uma requisição em andamento, a limpeza periódica segue o
    intervalo mesmo com o servidor ocioso. No Lambda a thread congela junto
    com o ambiente entre invocações.
    """
    global _global_event_loop, _loop_thread

    with _lifecycle_lock:
        if _global_event_loop is not None and not _global_event_loop.is_closed():
            return _global_event_loop

        loop = asyncio.new_event_loop()
        _loop_thread = threading.Thread(
            target=_run_loop_forever, args=(loop,), name="weather-event-loop", daemon=True
        )
        _loop_thread.start()
        _global_event_loop = loop

    return _global_event_loop


def _run_loop_forever(loop: asyncio.AbstractEventLoop) -> None:
    asyncio.set_event_loop(loop)
    loop.run_forever()


def run_async(coro):
    """Submete a coroutine ao loop do processo e bloqueia até o resultado"""
    loop = get_or_create_event_loop()
    return asyncio.run_coroutine_threadsafe(coro, loop).result()


def ensure_started() -> None:
    """Inicia o container (limpeza periódica do cache) na primeira invocação"""
    global _started

    if _started:
        return

    run_async(container.start())
    _started = True


def shutdown() -> None:
    """Hook de término do processo: para a limpeza, fecha a sessão HTTP e encerra o loop"""
    global _global_event_loop, _loop_thread, _started

    loop, thread = _global_event_loop, _loop_thread
    if loop is None or loop.is_closed():
        return

    run_async(container.shutdown())
    _started = False

    loop.call_soon_threadsafe(loop.stop)
    if thread is not None:
        thread.join(timeout=5)
    loop.close()
    _global_event_loop, _loop_thread = None, None

    logger.info("Lambda handler shut down", available_routes=len(AVAILABLE_ROUTES))
