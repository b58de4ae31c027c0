"""
Serviço de resolução de CEP com fallback entre providers.
Primário (BrasilAPI) é consultado primeiro; qualquer falha do primário
cai para o fallback (ViaCEP), cujas falhas são propagadas.
"""
import asyncio
from typing import Optional

from ddtrace import tracer

from application.ports.output.cep_provider_port import ICepProvider
from domain.entities.cep_result import CepResult
from domain.value_objects.zip_code import ZipCode
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CepResolutionService:
    """Resolve um CEP: primário e, se necessário, fallback"""

    def __init__(self, primary: ICepProvider, fallback: ICepProvider):
        if primary is None:
            raise ValueError("Primary CEP provider is required")
        if fallback is None:
            raise ValueError("Fallback CEP provider is required")
        self.primary = primary
        self.fallback = fallback

    @tracer.wrap(resource="service.cep_resolution.resolve")
    async def resolve(self, zip_code: ZipCode, timeout: Optional[float] = None) -> Optional[CepResult]:
        """
        Resolve o CEP

        Returns:
            CepResult do primário ou do fallback; None se ambos confirmam ausência

        Raises:
            Exceção do fallback (CepProviderException / ProviderTimeoutException)
        """
        try:
            result = await self.primary.lookup(zip_code, timeout=timeout)
            if result is not None:
                return result
            logger.info(
                "CEP not found on primary provider, trying fallback",
                zip_code=zip_code.value,
                provider=self.primary.provider_name
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(
                "Primary CEP provider failed, trying fallback",
                zip_code=zip_code.value,
                provider=self.primary.provider_name,
                error=str(e),
                error_type=type(e).__name__
            )

        try:
            result = await self.fallback.lookup(zip_code, timeout=timeout)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(
                "Fallback CEP provider failed",
                zip_code=zip_code.value,
                provider=self.fallback.provider_name,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        if result is None:
            logger.info("CEP not found on any provider", zip_code=zip_code.value)
        return result
