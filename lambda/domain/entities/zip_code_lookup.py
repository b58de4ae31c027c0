"""
ZipCodeLookup Entity - CEP consultado e persistido
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from domain.constants import App
from domain.entities.cep_result import CepResult


@dataclass(frozen=True)
class ZipCodeLookup:
    """
    Entidade persistida de consulta de CEP

    Invariante: no máximo um registro por zip_code (garantido pelo repositório).
    Criada apenas pelo caso de uso de inclusão; nunca atualizada.
    """
    id: str
    zip_code: str  # 8 dígitos, normalizado
    city: str
    state: str
    provider: str
    created_at: datetime  # UTC
    street: Optional[str] = None
    district: Optional[str] = None
    ibge: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_by: str = field(default=App.DEFAULT_ACTOR)

    @classmethod
    def from_cep_result(
        cls,
        cep_result: CepResult,
        created_at: Optional[datetime] = None,
        created_by: str = App.DEFAULT_ACTOR
    ) -> 'ZipCodeLookup':
        """Cria nova entidade (id novo) copiando os campos do CepResult"""
        location = cep_result.location
        return cls(
            id=str(uuid.uuid4()),
            zip_code=cep_result.zip_code.value,
            street=cep_result.street,
            district=cep_result.district,
            city=cep_result.city,
            state=cep_result.state,
            ibge=cep_result.ibge,
            latitude=location.latitude if location else None,
            longitude=location.longitude if location else None,
            provider=cep_result.provider,
            created_at=created_at or datetime.now(timezone.utc),
            created_by=created_by
        )

    def has_coordinates(self) -> bool:
        """Verifica se o registro possui latitude e longitude"""
        return self.latitude is not None and self.longitude is not None

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        location = None
        if self.has_coordinates():
            location = {'latitude': self.latitude, 'longitude': self.longitude}

        return {
            'id': self.id,
            'zipCode': self.zip_code,
            'street': self.street,
            'district': self.district,
            'city': self.city,
            'state': self.state,
            'ibge': self.ibge,
            'location': location,
            'provider': self.provider,
            'createdAtUtc': self.created_at.isoformat()
        }
