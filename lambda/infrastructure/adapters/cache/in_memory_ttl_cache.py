"""
In-Memory TTL Cache - cache de previsões no processo (warm Lambda)
Expiração absoluta a partir da escrita, verificada no acesso
"""
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class InMemoryTTLCache:
    """
    Cache em memória com TTL absoluto

    - clock injetável (time.monotonic por padrão) para testes determinísticos
    - entradas expiradas são removidas quando acessadas
    - cache desabilitado se comporta como miss permanente
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, enabled: bool = True):
        self._clock = clock
        self._enabled = enabled
        self._storage: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def is_enabled(self) -> bool:
        return self._enabled

    def get(self, key: str) -> Optional[Any]:
        if not self._enabled:
            return None
        with self._lock:
            item = self._storage.get(key)
            if item is None:
                return None
            expires_at, value = item
            if self._clock() >= expires_at:
                self._storage.pop(key, None)
                logger.debug("Cache entry expired", cache_key=key)
                return None
            return value

    def set(self, key: str, value: Any, ttl_seconds: int) -> bool:
        if not self._enabled:
            return False
        with self._lock:
            self._storage[key] = (self._clock() + ttl_seconds, value)
        return True

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._storage.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)


# Singleton global - reutilizado entre invocações Lambda
_cache_instance: Optional[InMemoryTTLCache] = None


def get_weather_cache() -> InMemoryTTLCache:
    """Retorna instância singleton do cache de previsões"""
    global _cache_instance

    if _cache_instance is None:
        from shared.config.settings import WEATHER_CACHE_ENABLED
        _cache_instance = InMemoryTTLCache(enabled=WEATHER_CACHE_ENABLED)
        logger.info("Weather cache created", enabled=WEATHER_CACHE_ENABLED)

    return _cache_instance
