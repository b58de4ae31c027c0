"""
WeatherResult Entity - Projeção de clima para um local salvo
Fonte: Open-Meteo (current + daily). Instâncias cacheadas nunca são mutadas;
alterações de rótulo/identidade geram cópia via dataclasses.replace.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from domain.constants import Providers


@dataclass(frozen=True)
class WeatherLocation:
    """Local da previsão"""
    lat: float
    lon: float
    city: Optional[str] = None
    state: Optional[str] = None

    def to_api_response(self) -> dict:
        return {
            'lat': self.lat,
            'lon': self.lon,
            'city': self.city,
            'state': self.state
        }


@dataclass(frozen=True)
class CurrentConditions:
    """Condições atuais"""
    temperature_c: float
    humidity: float  # fração 0-1
    apparent_temperature_c: float
    observed_at: datetime  # UTC

    def to_api_response(self) -> dict:
        return {
            'temperatureC': self.temperature_c,
            'humidity': self.humidity,
            'apparentTemperatureC': self.apparent_temperature_c,
            'observedAt': self.observed_at.isoformat()
        }


@dataclass(frozen=True)
class DailyTemperature:
    """Mínima/máxima de um dia"""
    date: str  # YYYY-MM-DD
    temp_min_c: float
    temp_max_c: float

    def to_api_response(self) -> dict:
        return {
            'date': self.date,
            'tempMinC': self.temp_min_c,
            'tempMaxC': self.temp_max_c
        }


@dataclass(frozen=True)
class WeatherResult:
    """Previsão de clima (current + daily) de um local"""
    location: WeatherLocation
    current: CurrentConditions
    daily: Tuple[DailyTemperature, ...]
    provider: str = Providers.OPENMETEO
    source_zip_code_id: Optional[str] = None

    def with_labels(self, city: Optional[str], state: Optional[str]) -> 'WeatherResult':
        """Retorna cópia com cidade/estado substituídos"""
        return replace(self, location=replace(self.location, city=city, state=state))

    def with_source(self, source_zip_code_id: str, city: Optional[str], state: Optional[str]) -> 'WeatherResult':
        """Retorna cópia vinculada ao CEP salvo de origem"""
        return replace(self.with_labels(city, state), source_zip_code_id=source_zip_code_id)

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'sourceZipCodeId': self.source_zip_code_id,
            'location': self.location.to_api_response(),
            'current': self.current.to_api_response(),
            'daily': [day.to_api_response() for day in self.daily],
            'provider': self.provider
        }
