"""ViaCEP Provider Package"""

from infrastructure.adapters.output.providers.viacep.viacep_provider import (
    ViaCepProvider,
    get_viacep_provider
)

__all__ = ['ViaCepProvider', 'get_viacep_provider']
