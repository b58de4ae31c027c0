"""
ViaCEP Mapper - Transforma payload do ViaCEP em CepResult
ViaCEP não retorna coordenadas: location é sempre None
"""
from typing import Any, Dict, Optional

from domain.constants import Providers
from domain.entities.cep_result import CepResult
from domain.value_objects.zip_code import ZipCode


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class ViaCepMapper:
    """Mapper de respostas do ViaCEP"""

    @staticmethod
    def is_not_found(data: Any) -> bool:
        """Payload {"erro": true} (bool ou string) indica CEP inexistente"""
        if not isinstance(data, dict):
            return True
        erro = data.get('erro')
        if isinstance(erro, str):
            return erro.strip().lower() == 'true'
        return erro is True

    @staticmethod
    def to_cep_result(zip_code: ZipCode, data: Dict[str, Any]) -> CepResult:
        return CepResult(
            zip_code=zip_code,
            street=_text(data.get('logradouro')),
            district=_text(data.get('bairro')),
            city=_text(data.get('localidade')) or "",
            state=_text(data.get('uf')) or "",
            ibge=_text(data.get('ibge')),
            location=None,
            provider=Providers.VIACEP
        )
