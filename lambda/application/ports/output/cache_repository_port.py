"""
Output Port: Interface para Cache Repository
Define contrato para implementações de cache (memória do processo, Redis, etc.)
"""
from typing import Any, Optional, Protocol


class ICacheRepository(Protocol):
    """Interface para repositório de cache com TTL absoluto"""

    def get(self, key: str) -> Optional[Any]:
        """
        Busca valor no cache

        Returns:
            Valor armazenado ou None se não encontrado/expirado
        """
        ...

    def set(self, key: str, value: Any, ttl_seconds: int) -> bool:
        """
        Armazena valor com TTL contado a partir da escrita

        Returns:
            True se salvo com sucesso, False caso contrário
        """
        ...

    def delete(self, key: str) -> bool:
        """Remove entrada do cache"""
        ...

    def is_enabled(self) -> bool:
        """Verifica se o cache está habilitado"""
        ...
