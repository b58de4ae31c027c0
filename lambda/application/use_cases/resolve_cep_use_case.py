"""
Use Case: Resolve CEP
Consulta um CEP (primário com fallback) sem persistir
"""
from typing import Optional

from ddtrace import tracer

from application.dtos.requests import GetCepRequest
from application.dtos.responses import FieldError, OperationResult
from application.ports.input.resolve_cep_port import IResolveCepUseCase
from application.services.cep_resolution_service import CepResolutionService
from domain.exceptions import InvalidZipCodeException
from domain.value_objects.zip_code import ZipCode
from shared.config.logger_config import get_logger
from shared.utils.validators import ZipCodeValidator

logger = get_logger(child=True)


def validate_zip_code_input(raw) -> tuple:
    """
    Valida o CEP de entrada (validator + value object)

    Returns:
        (ZipCode, None) se válido; (None, OperationResult VALIDATION_FAILED) caso contrário
    """
    try:
        ZipCodeValidator.validate(raw)
    except InvalidZipCodeException as e:
        return None, OperationResult.validation_failed(
            e.message,
            errors=[FieldError.from_exception(e, "zipCode")]
        )

    ok, zip_code = ZipCode.try_create(raw)
    if not ok:
        message = f"CEP inválido: '{raw}'"
        return None, OperationResult.validation_failed(
            message,
            errors=[FieldError(field="zipCode", message=message, attempted_value=raw)]
        )

    return zip_code, None


class ResolveCepUseCase(IResolveCepUseCase):
    """Consulta de CEP sem efeitos colaterais"""

    def __init__(self, cep_service: CepResolutionService):
        self.cep_service = cep_service

    @tracer.wrap(resource="use_case.resolve_cep")
    async def execute(self, request: GetCepRequest, timeout: Optional[float] = None) -> OperationResult:
        zip_code, failure = validate_zip_code_input(request.zip_code)
        if failure is not None:
            logger.info("Invalid zip code", zip_code=request.zip_code, error=failure.message)
            return failure

        cep = await self.cep_service.resolve(zip_code, timeout=timeout)
        if cep is None:
            return OperationResult.not_found(f"CEP '{request.zip_code}' não encontrado")

        logger.info("CEP resolved", zip_code=zip_code.value, provider=cep.provider)
        return OperationResult.ok(cep.to_api_response())
