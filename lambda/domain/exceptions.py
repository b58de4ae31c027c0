"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidZipCodeException(DomainException):
    """Raised when a raw zip code cannot be normalized to 8 digits"""
    pass


class InvalidForecastDaysException(DomainException):
    """Raised when forecast days is outside the 1-7 range"""
    pass


class DuplicateZipCodeException(DomainException):
    """Raised by the lookup store when the zip code is already persisted"""
    pass


class ConfigurationException(DomainException):
    """Raised when a required collaborator is missing at wiring time"""
    pass


class ProviderException(DomainException):
    """Raised when an external provider could not determine a result"""
    pass


class CepProviderException(ProviderException):
    """Raised when a CEP provider fails (transport or unexpected status)"""
    pass


class WeatherProviderException(ProviderException):
    """Raised when Open-Meteo fails (transport or unexpected status)"""
    pass


class ProviderTimeoutException(ProviderException):
    """Raised when a provider call exceeds its timeout"""
    pass
