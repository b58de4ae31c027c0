"""
Correlation ID - propagação do identificador de correlação por requisição

Usage:
    from shared.tracing import resolve_correlation_id, get_correlation_id

    correlation_id = resolve_correlation_id(event.get('headers'))
    ...
    get_correlation_id()  # mesmo valor em qualquer ponto da requisição
"""
import uuid
from contextvars import ContextVar
from typing import Mapping, Optional

from domain.constants import App

# Isolado por contexto (thread / task asyncio)
_correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)


def get_correlation_id() -> str:
    """Retorna o correlation id atual ou gera um novo."""
    correlation_id = _correlation_id_var.get()
    if not correlation_id:
        correlation_id = str(uuid.uuid4())
        _correlation_id_var.set(correlation_id)
    return correlation_id


def set_correlation_id(correlation_id: str) -> None:
    """Define o correlation id do contexto atual."""
    _correlation_id_var.set(correlation_id)


def clear_correlation_id() -> None:
    """Remove o correlation id do contexto."""
    _correlation_id_var.set(None)


def resolve_correlation_id(headers: Optional[Mapping[str, str]]) -> str:
    """
    Usa o header X-Correlation-ID da requisição (case-insensitive) ou gera um novo,
    e o registra no contexto atual.
    """
    incoming = None
    if headers:
        wanted = App.CORRELATION_HEADER.lower()
        for name, value in headers.items():
            if name.lower() == wanted and value:
                incoming = value.strip()
                break

    correlation_id = incoming or str(uuid.uuid4())
    set_correlation_id(correlation_id)
    return correlation_id
