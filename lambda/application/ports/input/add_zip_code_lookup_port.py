"""
Input Port: Interface para consultar e salvar um CEP
"""
from abc import ABC, abstractmethod
from typing import Optional

from application.dtos.requests import AddZipCodeLookupRequest
from application.dtos.responses import OperationResult


class IAddZipCodeLookupUseCase(ABC):
    """Interface para caso de uso de inclusão de CEP"""

    @abstractmethod
    async def execute(self, request: AddZipCodeLookupRequest, timeout: Optional[float] = None) -> OperationResult:
        """
        Valida, consulta e persiste o CEP

        Returns:
            OperationResult: CREATED, VALIDATION_FAILED, CONFLICT, NOT_FOUND ou INTERNAL_FAILURE

        Raises:
            ProviderException: Se o fallback falhar
        """
        pass
