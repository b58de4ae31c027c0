"""
Input Port: Interface para buscar clima dos CEPs salvos
"""
from abc import ABC, abstractmethod
from typing import Optional

from application.dtos.requests import GetWeatherRequest
from application.dtos.responses import OperationResult


class IGetWeatherUseCase(ABC):
    """Interface para caso de uso de clima dos CEPs salvos"""

    @abstractmethod
    async def execute(self, request: GetWeatherRequest, timeout: Optional[float] = None) -> OperationResult:
        """
        Busca previsão para cada CEP salvo (mais recente primeiro)

        Returns:
            OperationResult: OK com a lista, VALIDATION_FAILED, NOT_FOUND ou INTERNAL_FAILURE
        """
        pass
