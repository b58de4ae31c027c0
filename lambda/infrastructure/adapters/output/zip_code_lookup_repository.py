"""
Output Adapter: Repositório em memória de CEPs consultados
Vive enquanto o processo (container Lambda) estiver ativo
"""
import threading
from typing import Callable, Dict, List, Optional

from application.ports.output.zip_code_lookup_repository_port import IZipCodeLookupRepository
from domain.entities.zip_code_lookup import ZipCodeLookup
from domain.exceptions import DuplicateZipCodeException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class InMemoryZipCodeLookupRepository(IZipCodeLookupRepository):
    """
    Store em memória com índice único por zip_code

    Todas as operações são protegidas por lock; add nunca sobrescreve
    nem duplica um CEP existente.
    """

    def __init__(self):
        self._items: List[ZipCodeLookup] = []
        self._index_by_zip_code: Dict[str, ZipCodeLookup] = {}
        self._lock = threading.Lock()

    def find(self, predicate: Callable[[ZipCodeLookup], bool]) -> List[ZipCodeLookup]:
        with self._lock:
            snapshot = list(self._items)
        return [item for item in snapshot if predicate(item)]

    def add(self, entity: ZipCodeLookup) -> bool:
        if not isinstance(entity, ZipCodeLookup) or not entity.zip_code:
            logger.error("Refusing to persist invalid lookup", entity_type=type(entity).__name__)
            return False

        with self._lock:
            if entity.zip_code in self._index_by_zip_code:
                raise DuplicateZipCodeException(
                    "CEP já está persistido",
                    details={"zip_code": entity.zip_code}
                )
            self._items.append(entity)
            self._index_by_zip_code[entity.zip_code] = entity

        logger.debug("Lookup persisted", zip_code=entity.zip_code, lookup_id=entity.id)
        return True

    def get_by_zip_code(self, zip_code: str) -> Optional[ZipCodeLookup]:
        """Busca por CEP (O(1))"""
        with self._lock:
            return self._index_by_zip_code.get(zip_code)

    def get_all(self) -> List[ZipCodeLookup]:
        with self._lock:
            return list(self._items)

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._index_by_zip_code.clear()


# Singleton global - reutilizado entre invocações Lambda
_repository_instance: Optional[InMemoryZipCodeLookupRepository] = None


def get_zip_code_lookup_repository() -> InMemoryZipCodeLookupRepository:
    """Retorna instância singleton do repositório"""
    global _repository_instance

    if _repository_instance is None:
        _repository_instance = InMemoryZipCodeLookupRepository()

    return _repository_instance
