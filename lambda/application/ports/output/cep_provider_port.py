"""CEP Provider Port - Interface comum para provedores de CEP (BrasilAPI, ViaCEP)"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.cep_result import CepResult
from domain.value_objects.zip_code import ZipCode


class ICepProvider(ABC):
    """
    Interface para provedores de consulta de CEP.

    Contrato de retorno:
    - CepResult: CEP encontrado
    - None: provider confirmou que o CEP não existe
    - exceção (CepProviderException / ProviderTimeoutException): não foi possível determinar
    """

    @abstractmethod
    async def lookup(self, zip_code: ZipCode, timeout: Optional[float] = None) -> Optional[CepResult]:
        """
        Consulta um CEP no provider externo

        Args:
            zip_code: CEP normalizado
            timeout: Timeout da chamada em segundos (None usa o timeout da sessão)

        Returns:
            CepResult ou None se o CEP não existe no provider

        Raises:
            CepProviderException: Falha de transporte ou status inesperado
            ProviderTimeoutException: Timeout
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Tag do provider (ex: 'brasilapi')"""
        pass
