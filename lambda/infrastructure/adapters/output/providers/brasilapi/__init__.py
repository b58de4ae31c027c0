"""BrasilAPI Provider Package"""

from infrastructure.adapters.output.providers.brasilapi.brasilapi_provider import (
    BrasilApiProvider,
    get_brasilapi_provider
)

__all__ = ['BrasilApiProvider', 'get_brasilapi_provider']
