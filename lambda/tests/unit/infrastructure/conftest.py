"""
Fixtures para testes dos adapters HTTP (aiohttp mockado)
"""
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest


def build_mock_response(status: int = 200, payload=None):
    """Resposta aiohttp mockada usável em 'async with session.get(...)'"""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.request_info = MagicMock()
    mock_response.history = ()
    mock_response.raise_for_status = MagicMock()
    if status >= 400:
        mock_response.raise_for_status.side_effect = aiohttp.ClientResponseError(
            request_info=MagicMock(),
            history=(),
            status=status
        )
    mock_response.json = AsyncMock(return_value=payload)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=False)
    return mock_response


@pytest.fixture
def mock_response():
    return build_mock_response


@pytest.fixture
def mock_session():
    """Factory de sessão: respostas (ou exceções) retornadas em sequência"""
    def _make(*responses):
        session = MagicMock()
        if len(responses) == 1 and not isinstance(responses[0], BaseException):
            session.get = MagicMock(return_value=responses[0])
        else:
            session.get = MagicMock(side_effect=list(responses))
        return session

    return _make
