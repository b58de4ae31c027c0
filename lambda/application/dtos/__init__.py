"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.requests import (
    GetCepRequest,
    AddZipCodeLookupRequest,
    GetWeatherRequest
)
from application.dtos.responses import (
    FieldError,
    OperationResult,
    OutcomeKind
)

__all__ = [
    'GetCepRequest',
    'AddZipCodeLookupRequest',
    'GetWeatherRequest',
    'FieldError',
    'OperationResult',
    'OutcomeKind'
]
