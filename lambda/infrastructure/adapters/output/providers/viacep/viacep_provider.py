"""ViaCEP Provider - Provider de fallback de CEP (sem coordenadas)"""

import asyncio
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.cep_provider_port import ICepProvider
from domain.constants import API, Providers
from domain.entities.cep_result import CepResult
from domain.exceptions import CepProviderException, ProviderTimeoutException
from domain.value_objects.zip_code import ZipCode
from infrastructure.adapters.output.providers.http_fetch import fetch_json
from infrastructure.adapters.output.providers.viacep.mappers import ViaCepMapper
from shared.config import settings
from shared.config.aiohttp_session_manager import get_aiohttp_session_manager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ViaCepProvider(ICepProvider):
    """
    Provider para ViaCEP

    - {"erro": true} → None
    - Status não-2xx → CepProviderException
    - Timeout → ProviderTimeoutException
    """

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.VIACEP_BASE_URL).rstrip('/')
        self.session_manager = get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @property
    def provider_name(self) -> str:
        return Providers.VIACEP

    @tracer.wrap(resource="viacep.lookup")
    async def lookup(self, zip_code: ZipCode, timeout: Optional[float] = None) -> Optional[CepResult]:
        url = f"{self.base_url}/{zip_code.value}/json/"
        logger.info("Querying ViaCEP", zip_code=zip_code.value)

        try:
            _, data = await fetch_json(self.session_manager, url, timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error("ViaCEP timeout", zip_code=zip_code.value)
            raise ProviderTimeoutException(
                "Timeout ao consultar ViaCEP",
                details={"provider": self.provider_name, "zip_code": zip_code.value}
            ) from e
        except aiohttp.ClientResponseError as e:
            logger.error("ViaCEP returned error status", zip_code=zip_code.value, status=e.status)
            raise CepProviderException(
                f"ViaCEP retornou status {e.status}",
                details={"provider": self.provider_name, "zip_code": zip_code.value, "status": e.status}
            ) from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.error("ViaCEP request failed", zip_code=zip_code.value, error=str(e))
            raise CepProviderException(
                "Erro ao consultar ViaCEP",
                details={"provider": self.provider_name, "zip_code": zip_code.value, "error": str(e)}
            ) from e

        if ViaCepMapper.is_not_found(data):
            logger.warning("CEP not found on ViaCEP", zip_code=zip_code.value)
            return None

        logger.info("CEP found on ViaCEP", zip_code=zip_code.value)
        return ViaCepMapper.to_cep_result(zip_code, data)


# Factory singleton
_viacep_provider_instance: Optional[ViaCepProvider] = None


def get_viacep_provider() -> ViaCepProvider:
    """Retorna instância singleton do ViaCepProvider"""
    global _viacep_provider_instance
    if _viacep_provider_instance is None:
        _viacep_provider_instance = ViaCepProvider()
    return _viacep_provider_instance
