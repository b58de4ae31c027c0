"""
Input Port: Interface para consultar um CEP (sem persistir)
"""
from abc import ABC, abstractmethod
from typing import Optional

from application.dtos.requests import GetCepRequest
from application.dtos.responses import OperationResult


class IResolveCepUseCase(ABC):
    """Interface para caso de uso de consulta de CEP"""

    @abstractmethod
    async def execute(self, request: GetCepRequest, timeout: Optional[float] = None) -> OperationResult:
        """
        Consulta o CEP nos providers (primário com fallback)

        Returns:
            OperationResult: OK com o endereço, VALIDATION_FAILED ou NOT_FOUND

        Raises:
            ProviderException: Se o fallback falhar
        """
        pass
