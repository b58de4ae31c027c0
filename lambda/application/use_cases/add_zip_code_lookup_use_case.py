"""
Use Case: Add Zip Code Lookup
Valida, consulta (primário com fallback) e persiste um CEP.
Exatamente uma escrita no repositório em caso de sucesso; nenhuma em falha.
"""
from typing import Optional

from ddtrace import tracer

from application.dtos.requests import AddZipCodeLookupRequest
from application.dtos.responses import OperationResult
from application.ports.input.add_zip_code_lookup_port import IAddZipCodeLookupUseCase
from application.ports.output.zip_code_lookup_repository_port import IZipCodeLookupRepository
from application.services.cep_resolution_service import CepResolutionService
from application.use_cases.resolve_cep_use_case import validate_zip_code_input
from domain.entities.zip_code_lookup import ZipCodeLookup
from domain.exceptions import DuplicateZipCodeException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

CONFLICT_MESSAGE = "CEP já está persistido no banco de dados"
PERSISTENCE_FAILURE_MESSAGE = "Falha ao persistir CEP no banco de dados"


class AddZipCodeLookupUseCase(IAddZipCodeLookupUseCase):
    """Inclusão de CEP consultado"""

    def __init__(
        self,
        cep_service: CepResolutionService,
        repository: IZipCodeLookupRepository
    ):
        self.cep_service = cep_service
        self.repository = repository

    def _find_existing(self, zip_code: str) -> Optional[ZipCodeLookup]:
        existing = self.repository.find(lambda lookup: lookup.zip_code == zip_code)
        return existing[0] if existing else None

    @tracer.wrap(resource="use_case.add_zip_code_lookup")
    async def execute(self, request: AddZipCodeLookupRequest, timeout: Optional[float] = None) -> OperationResult:
        zip_code, failure = validate_zip_code_input(request.zip_code)
        if failure is not None:
            logger.info("Invalid zip code", zip_code=request.zip_code, error=failure.message)
            return failure

        existing = self._find_existing(zip_code.value)
        if existing is not None:
            logger.info("Zip code already persisted", zip_code=zip_code.value, lookup_id=existing.id)
            return OperationResult.conflict(CONFLICT_MESSAGE, data=existing.to_api_response())

        cep = await self.cep_service.resolve(zip_code, timeout=timeout)
        if cep is None:
            return OperationResult.not_found(f"CEP '{request.zip_code}' não encontrado")

        entity = ZipCodeLookup.from_cep_result(cep)

        try:
            saved = self.repository.add(entity)
        except DuplicateZipCodeException:
            # Inserção concorrente venceu entre o find e o add
            existing = self._find_existing(zip_code.value)
            logger.info("Zip code persisted concurrently", zip_code=zip_code.value)
            return OperationResult.conflict(
                CONFLICT_MESSAGE,
                data=existing.to_api_response() if existing else None
            )

        if not saved:
            logger.error("Failed to persist zip code", zip_code=zip_code.value)
            return OperationResult.internal_failure(PERSISTENCE_FAILURE_MESSAGE)

        logger.info(
            "Zip code persisted",
            zip_code=entity.zip_code,
            lookup_id=entity.id,
            provider=entity.provider
        )
        return OperationResult.created(entity.to_api_response())
