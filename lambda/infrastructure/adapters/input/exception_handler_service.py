"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado.
Respostas de erro seguem o formato problem details:
{"type", "title", "status", "detail", "traceId"}
"""
import json
from typing import Optional

from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    DomainException,
    InvalidForecastDaysException,
    InvalidZipCodeException,
    ProviderException,
    ProviderTimeoutException,
)
from shared.config import settings
from shared.config.logger_config import logger as app_logger
from shared.tracing import get_correlation_id

GENERIC_DETAIL = "Ocorreu um erro inesperado. Tente novamente mais tarde."
TIMEOUT_DETAIL = "O serviço externo não respondeu a tempo. Tente novamente mais tarde."


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def problem_response(status: int, title: str, detail: Optional[str], error_type: str) -> Response:
        """Monta resposta problem details com traceId da requisição"""
        return Response(
            status_code=status,
            content_type="application/json",
            body=json.dumps({
                "type": error_type,
                "title": title,
                "status": status,
                "detail": detail,
                "traceId": get_correlation_id()
            })
        )

    @staticmethod
    def _internal_detail(ex: Exception, fallback: str) -> str:
        # Detalhe interno só em desenvolvimento
        return str(ex) if settings.DEBUG else fallback

    @staticmethod
    def handle_validation_error(ex: DomainException) -> Response:
        """Handle 400 - CEP ou dias inválidos"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex), details=ex.details)
        return ExceptionHandlerService.problem_response(
            400, "Requisição inválida", ex.message, type(ex).__name__
        )

    @staticmethod
    def handle_provider_timeout(ex: ProviderTimeoutException) -> Response:
        """Handle 504 - Timeout em provider externo"""
        ExceptionHandlerService.logger.error("Provider timeout", error=str(ex), details=ex.details)
        return ExceptionHandlerService.problem_response(
            504,
            "Tempo limite excedido",
            ExceptionHandlerService._internal_detail(ex, TIMEOUT_DETAIL),
            "ProviderTimeoutException"
        )

    @staticmethod
    def handle_provider_error(ex: ProviderException) -> Response:
        """Handle 500 - Falha em provider externo"""
        ExceptionHandlerService.logger.error("Provider error", error=str(ex), details=ex.details, exc_info=True)
        return ExceptionHandlerService.problem_response(
            500,
            "Erro interno do servidor",
            ExceptionHandlerService._internal_detail(ex, GENERIC_DETAIL),
            "InternalServerError"
        )

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Corpo da requisição inválido (JSON malformado)"""
        ExceptionHandlerService.logger.warning("Malformed request", error=str(ex))
        return ExceptionHandlerService.problem_response(
            400, "Requisição inválida", "Corpo da requisição inválido", "ValidationError"
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors (timeout genérico → 504)"""
        if isinstance(ex, TimeoutError):
            ExceptionHandlerService.logger.error("Request timeout", error=str(ex), exc_info=True)
            return ExceptionHandlerService.problem_response(
                504,
                "Tempo limite excedido",
                ExceptionHandlerService._internal_detail(ex, TIMEOUT_DETAIL),
                "TimeoutError"
            )

        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ExceptionHandlerService.problem_response(
            500,
            "Erro interno do servidor",
            ExceptionHandlerService._internal_detail(ex, GENERIC_DETAIL),
            "InternalServerError"
        )
