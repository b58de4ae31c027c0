"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .resolve_cep_use_case import ResolveCepUseCase
from .add_zip_code_lookup_use_case import AddZipCodeLookupUseCase
from .get_weather_use_case import GetWeatherUseCase

__all__ = [
    'ResolveCepUseCase',
    'AddZipCodeLookupUseCase',
    'GetWeatherUseCase'
]
