"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass
from typing import Any

from domain.constants import Forecast


@dataclass(frozen=True)
class GetCepRequest:
    """Request para consultar um CEP sem persistir"""
    zip_code: Any


@dataclass(frozen=True)
class AddZipCodeLookupRequest:
    """Request para consultar e persistir um CEP"""
    zip_code: Any


@dataclass(frozen=True)
class GetWeatherRequest:
    """Request para buscar clima dos CEPs salvos"""
    days: Any = Forecast.DEFAULT_DAYS
