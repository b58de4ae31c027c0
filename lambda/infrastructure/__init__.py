"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de repositórios, cache e provedores externos
"""

from infrastructure.adapters.cache.in_memory_ttl_cache import InMemoryTTLCache, get_weather_cache
from infrastructure.adapters.output.zip_code_lookup_repository import (
    InMemoryZipCodeLookupRepository,
    get_zip_code_lookup_repository
)
from infrastructure.adapters.output.providers import (
    BrasilApiProvider,
    ViaCepProvider,
    OpenMeteoProvider,
    CepProviderFactory,
    WeatherProviderFactory
)

__all__ = [
    'InMemoryTTLCache',
    'get_weather_cache',
    'InMemoryZipCodeLookupRepository',
    'get_zip_code_lookup_repository',
    'BrasilApiProvider',
    'ViaCepProvider',
    'OpenMeteoProvider',
    'CepProviderFactory',
    'WeatherProviderFactory'
]
