"""
Configurações e fixtures compartilhadas para testes unitários
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.entities.cep_result import CepResult
from domain.entities.weather_result import (
    CurrentConditions,
    DailyTemperature,
    WeatherLocation,
    WeatherResult
)
from domain.entities.zip_code_lookup import ZipCodeLookup
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.zip_code import ZipCode


@pytest.fixture
def make_cep_result():
    """
    Factory fixture para criar CepResult com valores padrão

    Usage:
        def test_something(make_cep_result):
            cep = make_cep_result(provider='viacep', location=None)
    """
    def _make(
        zip_code: str = '01001000',
        city: str = 'São Paulo',
        state: str = 'SP',
        provider: str = 'brasilapi',
        street: str = 'Praça da Sé',
        district: str = 'Sé',
        ibge: str = '3550308',
        location=Coordinates(latitude=-23.5505, longitude=-46.6333)
    ) -> CepResult:
        return CepResult(
            zip_code=ZipCode.create(zip_code),
            city=city,
            state=state,
            provider=provider,
            street=street,
            district=district,
            ibge=ibge,
            location=location
        )

    return _make


@pytest.fixture
def make_lookup():
    """Factory fixture para ZipCodeLookup (created_at relativo a uma base fixa)"""
    base = datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)

    def _make(
        zip_code: str = '01001000',
        city: str = 'São Paulo',
        state: str = 'SP',
        latitude=-23.5505,
        longitude=-46.6333,
        minutes: int = 0,
        lookup_id: str = None
    ) -> ZipCodeLookup:
        return ZipCodeLookup(
            id=lookup_id or f'id-{zip_code}',
            zip_code=zip_code,
            city=city,
            state=state,
            provider='brasilapi',
            created_at=base + timedelta(minutes=minutes),
            latitude=latitude,
            longitude=longitude
        )

    return _make


@pytest.fixture
def make_weather_result():
    """Factory fixture para WeatherResult"""
    def _make(lat: float = -23.5505, lon: float = -46.6333, days: int = 3) -> WeatherResult:
        return WeatherResult(
            location=WeatherLocation(lat=lat, lon=lon),
            current=CurrentConditions(
                temperature_c=25.0,
                humidity=0.65,
                apparent_temperature_c=26.1,
                observed_at=datetime(2025, 1, 10, 15, 0, tzinfo=timezone.utc)
            ),
            daily=tuple(
                DailyTemperature(date=f'2025-01-{10 + i:02d}', temp_min_c=18.0 + i, temp_max_c=28.0 + i)
                for i in range(days)
            )
        )

    return _make


@pytest.fixture
def mock_cep_provider():
    """Factory de mocks de ICepProvider"""
    def _make(name: str, result=None, side_effect=None):
        provider = MagicMock()
        provider.provider_name = name
        provider.lookup = AsyncMock(return_value=result, side_effect=side_effect)
        return provider

    return _make
