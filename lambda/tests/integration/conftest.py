"""
Fixtures compartilhadas para testes de integração

Providers externos (BrasilAPI, ViaCEP, Open-Meteo) são substituídos por mocks;
o restante do fluxo (roteamento Powertools, use cases, repositório, cache) é real.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.ports.output.weather_provider_port import GeocodingResult
from infrastructure.adapters.cache.in_memory_ttl_cache import InMemoryTTLCache
from infrastructure.adapters.input import lambda_handler as handler_module
from infrastructure.adapters.output.providers.cep_provider_factory import CepProviderFactory
from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory
from infrastructure.adapters.output.zip_code_lookup_repository import InMemoryZipCodeLookupRepository
from tests.integration.api_events import CEP_DATABASE, forecast_payload


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'cep-weather-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:sa-east-1:123456789012:function:cep-weather-api'
        self.memory_limit_in_mb = '512'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/cep-weather-api'
        self.log_stream_name = '2025/11/18/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


@pytest.fixture
def cep_providers():
    """Primary (BrasilAPI) e fallback (ViaCEP) mockados sobre CEP_DATABASE"""
    async def lookup(zip_code, timeout=None):
        return CEP_DATABASE.get(zip_code.value)

    primary = MagicMock()
    primary.provider_name = 'brasilapi'
    primary.lookup = AsyncMock(side_effect=lookup)

    fallback = MagicMock()
    fallback.provider_name = 'viacep'
    fallback.lookup = AsyncMock(side_effect=lookup)
    return primary, fallback


@pytest.fixture
def weather_provider():
    """Open-Meteo mockado (previsão determinística pela latitude)"""
    async def get_forecast(latitude, longitude, days, timeout=None):
        return forecast_payload(latitude, days)

    async def geocode(city, state, timeout=None):
        return GeocodingResult(latitude=-19.9167, longitude=-43.9345, name=city, admin1=state, country='Brasil')

    provider = MagicMock()
    provider.provider_name = 'openmeteo'
    provider.get_forecast = AsyncMock(side_effect=get_forecast)
    provider.geocode = AsyncMock(side_effect=geocode)
    return provider


@pytest.fixture
def app_state(monkeypatch, cep_providers, weather_provider):
    """
    Isola os singletons do handler por teste (repositório, cache e factories)
    """
    primary, fallback = cep_providers
    repository = InMemoryZipCodeLookupRepository()
    cache = InMemoryTTLCache()
    cep_factory = CepProviderFactory(primary=primary, fallback=fallback)
    weather_factory = WeatherProviderFactory(provider=weather_provider)

    monkeypatch.setattr(handler_module, 'get_zip_code_lookup_repository', lambda: repository)
    monkeypatch.setattr(handler_module, 'get_weather_cache', lambda: cache)
    monkeypatch.setattr(handler_module, 'get_cep_provider_factory', lambda: cep_factory)
    monkeypatch.setattr(handler_module, 'get_weather_provider_factory', lambda: weather_factory)

    return {
        'repository': repository,
        'cache': cache,
        'primary': primary,
        'fallback': fallback,
        'weather_provider': weather_provider
    }
