"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Type-safe (não são floats soltos)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise ValueError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre -90 e 90 graus."
            )
        if not (-180 <= self.longitude <= 180):
            raise ValueError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre -180 e 180 graus."
            )

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_raw(cls, latitude: Any, longitude: Any) -> Optional['Coordinates']:
        """
        Cria coordenadas a partir de valores vindos de APIs externas
        (números ou strings). Retorna None quando ausentes ou inválidos.
        """
        if latitude in (None, "") or longitude in (None, ""):
            return None
        try:
            return cls(latitude=float(latitude), longitude=float(longitude))
        except (TypeError, ValueError):
            return None
