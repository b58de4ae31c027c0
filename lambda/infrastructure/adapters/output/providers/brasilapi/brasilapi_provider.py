"""BrasilAPI Provider - Provider primário de CEP (BrasilAPI v2, com coordenadas)"""

import asyncio
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.cep_provider_port import ICepProvider
from domain.constants import API, Providers
from domain.entities.cep_result import CepResult
from domain.exceptions import CepProviderException, ProviderTimeoutException
from domain.value_objects.zip_code import ZipCode
from infrastructure.adapters.output.providers.brasilapi.mappers import BrasilApiMapper
from infrastructure.adapters.output.providers.http_fetch import fetch_json
from shared.config import settings
from shared.config.aiohttp_session_manager import get_aiohttp_session_manager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class BrasilApiProvider(ICepProvider):
    """
    Provider para BrasilAPI CEP v2

    - 404 → None (CEP não existe)
    - Outros status não-2xx → CepProviderException
    - Timeout → ProviderTimeoutException
    """

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.BRASILAPI_BASE_URL).rstrip('/')

        # Usar gerenciador centralizado de sessão HTTP
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
        return Providers.BRASILAPI

    @tracer.wrap(resource="brasilapi.lookup")
    async def lookup(self, zip_code: ZipCode, timeout: Optional[float] = None) -> Optional[CepResult]:
        url = f"{self.base_url}/{zip_code.value}"
        logger.info("Querying BrasilAPI", zip_code=zip_code.value)

        try:
            status, data = await fetch_json(
                self.session_manager,
                url,
                timeout=timeout,
                passthrough_statuses=(404,)
            )
        except asyncio.TimeoutError as e:
            logger.error("BrasilAPI timeout", zip_code=zip_code.value)
            raise ProviderTimeoutException(
                "Timeout ao consultar BrasilAPI",
                details={"provider": self.provider_name, "zip_code": zip_code.value}
            ) from e
        except aiohttp.ClientResponseError as e:
            logger.error("BrasilAPI returned error status", zip_code=zip_code.value, status=e.status)
            raise CepProviderException(
                f"BrasilAPI retornou status {e.status}",
                details={"provider": self.provider_name, "zip_code": zip_code.value, "status": e.status}
            ) from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.error("BrasilAPI request failed", zip_code=zip_code.value, error=str(e))
            raise CepProviderException(
                "Erro ao consultar BrasilAPI",
                details={"provider": self.provider_name, "zip_code": zip_code.value, "error": str(e)}
            ) from e

        if status == 404 or not isinstance(data, dict):
            logger.warning("CEP not found on BrasilAPI", zip_code=zip_code.value)
            return None

        logger.info("CEP found on BrasilAPI", zip_code=zip_code.value)
        return BrasilApiMapper.to_cep_result(zip_code, data)


# Factory singleton
_brasilapi_provider_instance: Optional[BrasilApiProvider] = None


def get_brasilapi_provider() -> BrasilApiProvider:
    """Retorna instância singleton do BrasilApiProvider"""
    global _brasilapi_provider_instance
    if _brasilapi_provider_instance is None:
        _brasilapi_provider_instance = BrasilApiProvider()
    return _brasilapi_provider_instance
