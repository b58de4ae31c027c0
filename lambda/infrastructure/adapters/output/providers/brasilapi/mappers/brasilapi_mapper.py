"""
BrasilAPI Mapper - Transforma payload da BrasilAPI (v2) em CepResult
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from typing import Any, Dict, Optional

from domain.constants import Providers
from domain.entities.cep_result import CepResult
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.zip_code import ZipCode


def _text(value: Any) -> Optional[str]:
    """String não vazia ou None"""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class BrasilApiMapper:
    """Mapper de respostas da BrasilAPI"""

    @staticmethod
    def extract_coordinates(data: Dict[str, Any]) -> Optional[Coordinates]:
        """
        Coordenadas de location.coordinates (v2) ou de coordinates no topo.
        Valores podem vir como string ou número; vazios/inválidos viram None.
        """
        location = data.get('location') or {}
        coordinates = location.get('coordinates') if isinstance(location, dict) else None
        if not coordinates:
            coordinates = data.get('coordinates')
        if not isinstance(coordinates, dict):
            return None
        return Coordinates.from_raw(coordinates.get('latitude'), coordinates.get('longitude'))

    @staticmethod
    def to_cep_result(zip_code: ZipCode, data: Dict[str, Any]) -> CepResult:
        return CepResult(
            zip_code=zip_code,
            street=_text(data.get('street')),
            district=_text(data.get('neighborhood')),
            city=_text(data.get('city')) or "",
            state=_text(data.get('state')) or "",
            ibge=_text(data.get('ibge')),
            location=BrasilApiMapper.extract_coordinates(data),
            provider=Providers.BRASILAPI
        )
