"""
Configurações centralizadas da aplicação
"""
import os

from domain.constants import API, Cache

# Ambiente
APP_ENV = os.environ.get('APP_ENV', 'production')
DEBUG = os.environ.get('DEBUG', 'false').lower() in ('true', '1', 'yes') or APP_ENV == 'development'

# Logging / Datadog
SERVICE_NAME = os.environ.get('DD_SERVICE', 'cep-weather-api')

# Provedores externos
BRASILAPI_BASE_URL = os.environ.get('BRASILAPI_BASE_URL', API.BRASILAPI_BASE_URL)
VIACEP_BASE_URL = os.environ.get('VIACEP_BASE_URL', API.VIACEP_BASE_URL)
OPENMETEO_BASE_URL = os.environ.get('OPENMETEO_BASE_URL', API.OPENMETEO_BASE_URL)
OPENMETEO_GEOCODING_URL = os.environ.get('OPENMETEO_GEOCODING_URL', API.OPENMETEO_GEOCODING_URL)

# Cache de clima (memória do processo)
WEATHER_CACHE_TTL_SECONDS = int(os.environ.get('WEATHER_CACHE_TTL_SECONDS', str(Cache.TTL_WEATHER)))
WEATHER_CACHE_ENABLED = os.environ.get('WEATHER_CACHE_ENABLED', 'true').lower() in ('true', '1', 'yes')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
