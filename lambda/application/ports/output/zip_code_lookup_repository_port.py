"""
Output Port: Interface do Repositório de CEPs consultados
Define o contrato que deve ser implementado pela camada de infraestrutura
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from domain.entities.zip_code_lookup import ZipCodeLookup


class IZipCodeLookupRepository(ABC):
    """Interface para o store de ZipCodeLookup"""

    @abstractmethod
    def find(self, predicate: Callable[[ZipCodeLookup], bool]) -> List[ZipCodeLookup]:
        """Retorna registros que satisfazem o predicado"""
        pass

    @abstractmethod
    def add(self, entity: ZipCodeLookup) -> bool:
        """
        Persiste um novo registro

        Returns:
            True se persistido, False em falha de persistência

        Raises:
            DuplicateZipCodeException: Se o CEP já está persistido
        """
        pass
