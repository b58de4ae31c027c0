"""
CepResult Entity - Resultado normalizado de uma consulta de CEP
Produzido pelos providers (BrasilAPI / ViaCEP); nunca cacheado
"""
from dataclasses import dataclass
from typing import Optional

from domain.value_objects.coordinates import Coordinates
from domain.value_objects.zip_code import ZipCode


@dataclass(frozen=True)
class CepResult:
    """Endereço normalizado de um CEP"""
    zip_code: ZipCode
    city: str
    state: str  # UF (2 letras)
    provider: str  # "brasilapi" ou "viacep"
    street: Optional[str] = None
    district: Optional[str] = None
    ibge: Optional[str] = None
    location: Optional[Coordinates] = None

    def has_location(self) -> bool:
        return self.location is not None

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'zipCode': self.zip_code.value,
            'street': self.street,
            'district': self.district,
            'city': self.city,
            'state': self.state,
            'ibge': self.ibge,
            'location': self.location.to_dict() if self.location else None,
            'provider': self.provider
        }
