"""
Configuração centralizada de logging da API de CEP/clima
Logger AWS Lambda Powertools (JSON estruturado) com service name do Datadog
"""
import os
from typing import Optional

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'cep-weather-api'


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa DD_SERVICE do ambiente)
        child: Se True, cria um child logger (herda chaves do logger principal)

    Returns:
        Logger configurado
    """
    service_name = service_name or os.environ.get('DD_SERVICE', DEFAULT_SERVICE_NAME)

    if child:
        return Logger(service=service_name, child=True)

    return Logger(
        service=service_name,
        level=os.environ.get('LOG_LEVEL', 'INFO')
    )


def bind_correlation_id(target: Logger, correlation_id: str) -> None:
    """Anexa o correlation id a todos os logs seguintes da invocação"""
    target.append_keys(correlation_id=correlation_id)


# Logger principal da aplicação
logger = get_logger()
