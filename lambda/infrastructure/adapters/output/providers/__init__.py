"""Infrastructure Providers - Implementações de provedores de CEP e clima"""

from infrastructure.adapters.output.providers.brasilapi.brasilapi_provider import BrasilApiProvider
from infrastructure.adapters.output.providers.viacep.viacep_provider import ViaCepProvider
from infrastructure.adapters.output.providers.openmeteo.openmeteo_provider import OpenMeteoProvider
from infrastructure.adapters.output.providers.cep_provider_factory import CepProviderFactory
from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory

__all__ = [
    'BrasilApiProvider',
    'ViaCepProvider',
    'OpenMeteoProvider',
    'CepProviderFactory',
    'WeatherProviderFactory'
]
