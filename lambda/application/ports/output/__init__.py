"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .cache_repository_port import ICacheRepository
from .cep_provider_port import ICepProvider
from .weather_provider_port import IWeatherProvider
from .zip_code_lookup_repository_port import IZipCodeLookupRepository
