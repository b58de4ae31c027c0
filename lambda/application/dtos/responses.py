"""Response DTOs - Resultado tagueado retornado pelos use cases"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from domain.exceptions import DomainException


class OutcomeKind(Enum):
    """Tipo de resultado de uma operação e seu status HTTP"""
    OK = 200
    CREATED = 201
    VALIDATION_FAILED = 400
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_FAILURE = 500


@dataclass(frozen=True)
class FieldError:
    """Erro de validação de um campo"""
    field: str
    message: str
    attempted_value: Any = None

    @staticmethod
    def from_exception(exc: DomainException, default_field: str) -> 'FieldError':
        details = exc.details or {}
        return FieldError(
            field=details.get('field', default_field),
            message=exc.message,
            attempted_value=details.get('attempted_value')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.field,
            'message': self.message,
            'attemptedValue': self.attempted_value
        }


@dataclass(frozen=True)
class OperationResult:
    """
    Resultado de um use case

    success é derivado do kind (OK/CREATED). O adapter HTTP usa status_code
    para o status da resposta e to_dict para o corpo.
    """
    kind: OutcomeKind
    message: Optional[str] = None
    data: Any = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.kind in (OutcomeKind.OK, OutcomeKind.CREATED)

    @property
    def status_code(self) -> int:
        return self.kind.value

    @staticmethod
    def ok(data: Any, message: Optional[str] = None) -> 'OperationResult':
        return OperationResult(OutcomeKind.OK, message=message, data=data)

    @staticmethod
    def created(data: Any, message: Optional[str] = None) -> 'OperationResult':
        return OperationResult(OutcomeKind.CREATED, message=message, data=data)

    @staticmethod
    def validation_failed(message: str, errors: Optional[List[FieldError]] = None) -> 'OperationResult':
        return OperationResult(OutcomeKind.VALIDATION_FAILED, message=message, errors=list(errors or []))

    @staticmethod
    def not_found(message: str) -> 'OperationResult':
        return OperationResult(OutcomeKind.NOT_FOUND, message=message)

    @staticmethod
    def conflict(message: str, data: Any = None) -> 'OperationResult':
        return OperationResult(OutcomeKind.CONFLICT, message=message, data=data)

    @staticmethod
    def internal_failure(message: str) -> 'OperationResult':
        return OperationResult(OutcomeKind.INTERNAL_FAILURE, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário para resposta JSON"""
        return {
            'success': self.success,
            'message': self.message,
            'data': self.data,
            'errors': [error.to_dict() for error in self.errors]
        }
