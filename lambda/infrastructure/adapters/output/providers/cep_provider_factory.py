"""
CEP Provider Factory - vincula estaticamente primário (BrasilAPI) e fallback (ViaCEP)
"""
from typing import Optional

from application.ports.output.cep_provider_port import ICepProvider
from application.services.cep_resolution_service import CepResolutionService
from domain.exceptions import ConfigurationException
from infrastructure.adapters.output.providers.brasilapi import get_brasilapi_provider
from infrastructure.adapters.output.providers.viacep import get_viacep_provider


class CepProviderFactory:
    """
    Factory dos providers de CEP

    A ordem é fixa: primário = BrasilAPI, fallback = ViaCEP.
    Providers podem ser injetados (testes / local_server).
    """

    def __init__(
        self,
        primary: Optional[ICepProvider] = None,
        fallback: Optional[ICepProvider] = None
    ):
        self._primary = primary
        self._fallback = fallback

    def get_primary_provider(self) -> ICepProvider:
        if self._primary is None:
            self._primary = get_brasilapi_provider()
        return self._primary

    def get_fallback_provider(self) -> ICepProvider:
        if self._fallback is None:
            self._fallback = get_viacep_provider()
        return self._fallback

    def create_resolution_service(self) -> CepResolutionService:
        """
        Cria CepResolutionService com os dois providers

        Raises:
            ConfigurationException: Se algum provider não puder ser resolvido
        """
        primary = self.get_primary_provider()
        fallback = self.get_fallback_provider()
        if primary is None or fallback is None:
            raise ConfigurationException(
                "Primary and fallback CEP providers must both be configured",
                details={
                    "primary": type(primary).__name__ if primary else None,
                    "fallback": type(fallback).__name__ if fallback else None
                }
            )
        return CepResolutionService(primary=primary, fallback=fallback)


# Factory singleton global
_factory_instance: Optional[CepProviderFactory] = None


def get_cep_provider_factory() -> CepProviderFactory:
    """Retorna singleton da factory de providers de CEP"""
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = CepProviderFactory()

    return _factory_instance
