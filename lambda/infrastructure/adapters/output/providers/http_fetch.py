"""
HTTP fetch com retry (tenacity) compartilhado pelos providers
Retry com exponential backoff apenas em 429/503 e timeouts
"""
import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

import aiohttp
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
    before_sleep_log
)

from domain.constants import API
from shared.config.aiohttp_session_manager import AiohttpSessionManager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def is_retryable(exc: BaseException) -> bool:
    """Rate limit (429), service unavailable (503) e timeouts"""
    if isinstance(exc, aiohttp.ClientResponseError):
        return exc.status in API.HTTP_RETRY_STATUSES
    return isinstance(exc, asyncio.TimeoutError)


async def fetch_json(
    session_manager: AiohttpSessionManager,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
    passthrough_statuses: Tuple[int, ...] = ()
) -> Tuple[int, Any]:
    """
    GET com retry e parse do JSON

    Args:
        session_manager: Gerenciador da sessão aiohttp compartilhada
        url: URL completa
        params: Query string
        timeout: Timeout da chamada em segundos (None usa o da sessão)
        passthrough_statuses: Status não-2xx devolvidos ao chamador sem erro (ex: 404)

    Returns:
        (status, json) - json é None para status em passthrough_statuses

    Raises:
        aiohttp.ClientResponseError: Status não-2xx (após retries para 429/503)
        aiohttp.ClientError / asyncio.TimeoutError: Falha de transporte
    """
    session = await session_manager.get_session()

    request_kwargs: Dict[str, Any] = {}
    if params:
        request_kwargs['params'] = params
    request_timeout = session_manager.request_timeout(timeout)
    if request_timeout is not None:
        request_kwargs['timeout'] = request_timeout

    # Constantes lidas a cada chamada (testes zeram as esperas)
    @retry(
        retry=retry_if_exception(is_retryable),
        stop=stop_after_attempt(API.HTTP_RETRY_ATTEMPTS),
        wait=wait_exponential(
            multiplier=API.HTTP_RETRY_MULTIPLIER,
            min=API.HTTP_RETRY_WAIT_MIN,
            max=API.HTTP_RETRY_WAIT_MAX
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )
    async def fetch_with_retry():
        async with session.get(url, **request_kwargs) as response:
            if response.status in passthrough_statuses:
                return response.status, None
            # Apenas retry em rate limit (429) e service unavailable (503)
            if response.status in API.HTTP_RETRY_STATUSES:
                raise aiohttp.ClientResponseError(
                    request_info=response.request_info,
                    history=response.history,
                    status=response.status
                )
            response.raise_for_status()
            return response.status, await response.json(content_type=None)

    return await fetch_with_retry()
