"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import json
import asyncio
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.dtos.requests import AddZipCodeLookupRequest, GetCepRequest, GetWeatherRequest
from application.dtos.responses import OperationResult
from application.services.weather_service import WeatherService
from application.use_cases.add_zip_code_lookup_use_case import AddZipCodeLookupUseCase
from application.use_cases.get_weather_use_case import GetWeatherUseCase
from application.use_cases.resolve_cep_use_case import ResolveCepUseCase

# Domain Layer - Exceptions
from domain.constants import App, Forecast
from domain.exceptions import (
    InvalidForecastDaysException,
    InvalidZipCodeException,
    ProviderException,
    ProviderTimeoutException
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.cache.in_memory_ttl_cache import get_weather_cache
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.warmup_service import WarmupService
from infrastructure.adapters.output.providers.cep_provider_factory import get_cep_provider_factory
from infrastructure.adapters.output.providers.weather_provider_factory import get_weather_provider_factory
from infrastructure.adapters.output.zip_code_lookup_repository import get_zip_code_lookup_repository

# Shared Layer - Utilities
from shared.config import settings
from shared.config.logger_config import bind_correlation_id, get_logger
from shared.tracing import clear_correlation_id, resolve_correlation_id

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(
    cors=CORSConfig(
        allow_origin=settings.CORS_ORIGIN,
        allow_headers=[App.CORRELATION_HEADER],
        expose_headers=[App.CORRELATION_HEADER]
    )
)

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService(logger=logger)

app.exception_handler(InvalidZipCodeException)(exception_service.handle_validation_error)
app.exception_handler(InvalidForecastDaysException)(exception_service.handle_validation_error)
app.exception_handler(ProviderTimeoutException)(exception_service.handle_provider_timeout)
app.exception_handler(ProviderException)(exception_service.handle_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def to_response(result: OperationResult) -> Response:
    """Converte OperationResult em resposta HTTP (status vem do kind)"""
    return Response(
        status_code=result.status_code,
        content_type="application/json",
        body=json.dumps(result.to_dict())
    )


def build_weather_service() -> WeatherService:
    """WeatherService com provider e cache singletons"""
    return WeatherService(
        weather_provider=get_weather_provider_factory().get_weather_provider(),
        cache=get_weather_cache(),
        ttl_seconds=settings.WEATHER_CACHE_TTL_SECONDS
    )


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/api/v1/cep/<zip_code>")
def get_cep_route(zip_code: str):
    """
    GET /api/v1/cep/{zipCode}

    Consulta o CEP (BrasilAPI com fallback ViaCEP) sem persistir
    """
    cep_service = get_cep_provider_factory().create_resolution_service()
    use_case = ResolveCepUseCase(cep_service)

    result = run_async(use_case.execute(GetCepRequest(zip_code=zip_code)))
    return to_response(result)


@app.post("/api/v1/cep")
def add_zip_code_lookup_route():
    """
    POST /api/v1/cep
    Body: { "zipCode": "01001-000" }

    Consulta e salva o CEP (201 / 400 / 404 / 409 / 500)
    """
    body = app.current_event.json_body if app.current_event.body else None
    zip_code = body.get('zipCode') if isinstance(body, dict) else None

    cep_service = get_cep_provider_factory().create_resolution_service()
    use_case = AddZipCodeLookupUseCase(
        cep_service=cep_service,
        repository=get_zip_code_lookup_repository()
    )

    result = run_async(use_case.execute(AddZipCodeLookupRequest(zip_code=zip_code)))
    return to_response(result)


@app.get("/api/v1/weather")
def get_weather_route():
    """
    GET /api/v1/weather?days=3

    Previsão para todos os CEPs salvos (mais recentes primeiro)

    Query params (optional):
    - days: 1 a 7 (default 3)
    """
    days = app.current_event.get_query_string_value(
        name="days",
        default_value=str(Forecast.DEFAULT_DAYS)
    )

    use_case = GetWeatherUseCase(
        weather_service=build_weather_service(),
        repository=get_zip_code_lookup_repository()
    )

    result = run_async(use_case.execute(GetWeatherRequest(days=days)))
    return to_response(result)


@app.get("/api/v1/health")
def health_route():
    """GET /api/v1/health - probe de disponibilidade"""
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "savedZipCodes": get_zip_code_lookup_repository().count()
    }


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - 100% ASYNC

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Datadog APM manages:
    - Distributed tracing
    - Performance monitoring

    Available routes:
    - GET  /api/v1/cep/{zipCode}
    - POST /api/v1/cep            body: {"zipCode": "..."}
    - GET  /api/v1/weather?days=3
    - GET  /api/v1/health
    """
    warmup_response = warmup_service.handle_warmup_ping(event)
    if warmup_response is not None:
        return warmup_response

    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    correlation_id = resolve_correlation_id(headers)
    bind_correlation_id(logger, correlation_id)

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A')
    )

    try:
        response = app.resolve(event, context)
    finally:
        clear_correlation_id()

    # Add CORS headers manually
    if 'headers' not in response or response['headers'] is None:
        response['headers'] = {}

    response['headers'][App.CORRELATION_HEADER] = correlation_id
    response['headers']['Access-Control-Allow-Origin'] = settings.CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = f'Content-Type,Authorization,X-Api-Key,{App.CORRELATION_HEADER}'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,POST,OPTIONS'
    response['headers']['Access-Control-Expose-Headers'] = App.CORRELATION_HEADER

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=isinstance(status_code, int) and status_code < 400
    )
    logger.remove_keys(["correlation_id"])

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Benefícios:
    - Reutiliza event loop entre invocações Lambda (warm starts)
    - Sessão aiohttp permanece válida entre invocações
    """
    global _global_event_loop

    # Se loop existe e não está fechado, reutilizar
    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    # Criar novo loop se necessário
    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)


warmup_service = WarmupService(
    logger=logger,
    get_or_create_event_loop=get_or_create_event_loop,
    run_async=run_async,
    get_cep_provider_factory=get_cep_provider_factory,
    get_weather_provider_factory=get_weather_provider_factory,
    get_repository=get_zip_code_lookup_repository,
    get_cache=get_weather_cache,
)
