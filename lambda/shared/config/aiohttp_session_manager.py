"""
Aiohttp Session Manager - sessão HTTP compartilhada pelos provedores (BrasilAPI, ViaCEP, Open-Meteo)
Reutiliza a sessão entre invocações Lambda (warm starts) enquanto o event loop for o mesmo
"""
import asyncio
from typing import Optional

import aiohttp

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton de sessão aiohttp

    - Uma sessão por event loop (asyncio.run cria loops novos)
    - Pool de conexões compartilhado entre os três provedores
    - Timeout global na sessão; cada chamada pode sobrescrever via request_timeout()

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url, timeout=manager.request_timeout(2.0)) as response:
            data = await response.json()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        total_timeout: float = 8,
        connect_timeout: float = 3,
        sock_read_timeout: float = 5,
        limit: int = 100,
        limit_per_host: int = 30,
        ttl_dns_cache: int = 300
    ):
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(cls, **kwargs) -> 'AiohttpSessionManager':
        """
        Retorna instância singleton do gerenciador

        Os kwargs só têm efeito na primeira criação.
        """
        if cls._instance is None:
            cls._instance = cls(**kwargs)
            logger.info(
                "AiohttpSessionManager singleton created",
                total_timeout=cls._instance.total_timeout,
                limit=cls._instance.limit
            )
        return cls._instance

    def request_timeout(self, timeout: Optional[float]) -> Optional[aiohttp.ClientTimeout]:
        """
        Timeout por requisição informado pelo chamador

        Returns:
            ClientTimeout com total=timeout ou None (usa o timeout da sessão)
        """
        if timeout is None:
            return None
        return aiohttp.ClientTimeout(
            total=timeout,
            connect=min(timeout, self.connect_timeout)
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        A sessão é recriada quando o event loop muda ou foi fechada.
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None
                and not self._session.closed
                and self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(
            timeout=timeout,
            connector=connector,
            headers={"Accept": "application/json"}
        )
        self._session_loop_id = current_loop_id

        logger.info("Aiohttp session created", loop_id=current_loop_id, limit=self.limit)
        return self._session

    async def _close_session(self) -> None:
        """Fecha sessão aiohttp existente"""
        if self._session is None or self._session.closed:
            return
        try:
            await self._session.close()
            logger.info("Aiohttp session closed", loop_id=self._session_loop_id)
        except aiohttp.ClientError as e:
            logger.warning("Error closing aiohttp session", error=str(e))
        finally:
            self._session = None
            self._session_loop_id = None

    async def cleanup(self) -> None:
        """Fecha sessão e libera recursos"""
        await self._close_session()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (útil para testes)"""
        cls._instance = None


def get_aiohttp_session_manager(
    total_timeout: float = 8,
    connect_timeout: float = 3,
    sock_read_timeout: float = 5,
    limit: int = 100,
    limit_per_host: int = 30,
    ttl_dns_cache: int = 300
) -> AiohttpSessionManager:
    """Factory function para obter instância singleton do gerenciador"""
    return AiohttpSessionManager.get_instance(
        total_timeout=total_timeout,
        connect_timeout=connect_timeout,
        sock_read_timeout=sock_read_timeout,
        limit=limit,
        limit_per_host=limit_per_host,
        ttl_dns_cache=ttl_dns_cache
    )
