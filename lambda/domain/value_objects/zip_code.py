"""
Value Object para CEP (Código de Endereçamento Postal)
Garante normalização e validação no domínio
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.constants import ZipCodeRules
from domain.exceptions import InvalidZipCodeException


@dataclass(frozen=True)
class ZipCode:
    """
    Value Object para CEP

    Características:
    - Imutável (frozen=True)
    - Sempre 8 dígitos (normalizado, sem hífen/espaços)
    - Igualdade por valor
    """
    value: str

    def __post_init__(self):
        """Valida o valor já normalizado"""
        self._validate(self.value, self.value)

    @staticmethod
    def normalize(raw: str) -> str:
        """Remove hífens e espaços"""
        normalized = raw
        for char in ZipCodeRules.STRIP_CHARS:
            normalized = normalized.replace(char, "")
        return normalized

    @staticmethod
    def _validate(normalized: str, raw: Optional[str]) -> None:
        details = {"field": "zip_code", "attempted_value": raw}

        if not normalized:
            raise InvalidZipCodeException("CEP é obrigatório", details=details)

        # str.isdigit aceita dígitos unicode (ex: '²'); exigimos ASCII
        if not (normalized.isascii() and normalized.isdigit()):
            raise InvalidZipCodeException("CEP deve conter apenas dígitos", details=details)

        if len(normalized) != ZipCodeRules.LENGTH:
            raise InvalidZipCodeException(
                f"CEP deve conter {ZipCodeRules.LENGTH} dígitos",
                details={**details, "length": len(normalized)}
            )

    @classmethod
    def create(cls, raw: Optional[str]) -> 'ZipCode':
        """
        Factory method: normaliza e valida um CEP bruto

        Args:
            raw: CEP com ou sem hífen (ex: '01001-000', '01001 000', '01001000')

        Returns:
            Instância de ZipCode

        Raises:
            InvalidZipCodeException: Se vazio, com caracteres inválidos ou tamanho != 8
        """
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidZipCodeException(
                "CEP é obrigatório",
                details={"field": "zip_code", "attempted_value": raw}
            )

        normalized = cls.normalize(raw)
        cls._validate(normalized, raw)
        return cls(value=normalized)

    @classmethod
    def try_create(cls, raw: Optional[str]) -> Tuple[bool, Optional['ZipCode']]:
        """Variante que não lança exceção: (sucesso, ZipCode | None)"""
        try:
            return True, cls.create(raw)
        except InvalidZipCodeException:
            return False, None

    @property
    def formatted(self) -> str:
        """CEP no formato NNNNN-NNN"""
        return f"{self.value[:5]}-{self.value[5:]}"

    def __str__(self) -> str:
        return self.value
