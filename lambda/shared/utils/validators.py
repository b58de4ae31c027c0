"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Any, Type

from domain.constants import Forecast, ZipCodeRules
from domain.exceptions import DomainException, InvalidForecastDaysException, InvalidZipCodeException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: int,
        min_val: int,
        max_val: int,
        param_name: str,
        exception_class: Type[DomainException] = DomainException
    ) -> int:
        """
        Valida se valor numérico está dentro do range (inclusivo)

        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            raise exception_class(
                f"{param_name} must be between {min_val} and {max_val}",
                details={
                    "field": param_name,
                    "attempted_value": value,
                    "min": min_val,
                    "max": max_val
                }
            )
        return value

    @staticmethod
    def parse_int(
        value: Any,
        param_name: str,
        exception_class: Type[DomainException] = DomainException
    ) -> int:
        """Converte query string / JSON para int"""
        if isinstance(value, bool):
            raise exception_class(
                f"{param_name} must be an integer",
                details={"field": param_name, "attempted_value": value}
            )
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            raise exception_class(
                f"{param_name} must be an integer",
                details={"field": param_name, "attempted_value": value}
            )


class ZipCodeValidator:
    """Validate zip code input (non-empty, 8 digits after removing '-' and ' ')"""

    REQUIRED_MESSAGE = "CEP é obrigatório!"
    INVALID_MESSAGE = "CEP inválido. Deve conter 8 dígitos."

    @staticmethod
    def is_valid(zip_code: Any) -> bool:
        if not isinstance(zip_code, str) or not zip_code.strip():
            return False
        normalized = zip_code
        for char in ZipCodeRules.STRIP_CHARS:
            normalized = normalized.replace(char, "")
        return (
            len(normalized) == ZipCodeRules.LENGTH
            and normalized.isascii()
            and normalized.isdigit()
        )

    @staticmethod
    def validate(zip_code: Any) -> str:
        """
        Validate zip code format

        Returns:
            The raw zip code (trimmed)

        Raises:
            InvalidZipCodeException: If empty or malformed
        """
        if not isinstance(zip_code, str) or not zip_code.strip():
            raise InvalidZipCodeException(
                ZipCodeValidator.REQUIRED_MESSAGE,
                details={"field": "zipCode", "attempted_value": zip_code}
            )
        if not ZipCodeValidator.is_valid(zip_code):
            raise InvalidZipCodeException(
                ZipCodeValidator.INVALID_MESSAGE,
                details={"field": "zipCode", "attempted_value": zip_code}
            )
        return zip_code.strip()


class ForecastDaysValidator:
    """Validate forecast days parameter"""

    MIN_DAYS = Forecast.MIN_DAYS
    MAX_DAYS = Forecast.MAX_DAYS

    @staticmethod
    def validate(days: Any) -> int:
        """
        Validate days is an integer within 1..7

        Raises:
            InvalidForecastDaysException: If not an integer or out of range
        """
        parsed = GenericValidator.parse_int(days, "days", InvalidForecastDaysException)
        return GenericValidator.validate_range(
            value=parsed,
            min_val=ForecastDaysValidator.MIN_DAYS,
            max_val=ForecastDaysValidator.MAX_DAYS,
            param_name="days",
            exception_class=InvalidForecastDaysException
        )
