"""Weather Provider Port - Interface para o provedor de previsão/geocodificação (Open-Meteo)"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CurrentPayload:
    """Seção 'current' da resposta do provider (umidade em 0-100%)"""
    time: Optional[str] = None
    temperature: Optional[float] = None
    relative_humidity: Optional[float] = None
    apparent_temperature: Optional[float] = None


@dataclass(frozen=True)
class DailyPayload:
    """Seção 'daily' da resposta do provider (listas paralelas)"""
    time: List[str] = field(default_factory=list)
    temperature_max: List[Optional[float]] = field(default_factory=list)
    temperature_min: List[Optional[float]] = field(default_factory=list)


@dataclass(frozen=True)
class ForecastPayload:
    """Resposta de previsão; seções ausentes ficam como None"""
    current: Optional[CurrentPayload] = None
    daily: Optional[DailyPayload] = None

    def is_complete(self) -> bool:
        return self.current is not None and self.daily is not None


@dataclass(frozen=True)
class GeocodingResult:
    """Primeiro resultado da geocodificação"""
    latitude: float
    longitude: float
    name: str = ""
    admin1: str = ""  # estado
    country: str = ""


class IWeatherProvider(ABC):
    """Interface do provedor de clima"""

    @abstractmethod
    async def get_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int,
        timeout: Optional[float] = None
    ) -> Optional[ForecastPayload]:
        """
        Busca condições atuais + mín/máx diárias

        Args:
            latitude: Latitude
            longitude: Longitude
            days: Dias de previsão (já validado 1-7 pelo chamador)
            timeout: Timeout da chamada em segundos

        Raises:
            WeatherProviderException / ProviderTimeoutException
        """
        pass

    @abstractmethod
    async def geocode(
        self,
        city: str,
        state: str,
        timeout: Optional[float] = None
    ) -> Optional[GeocodingResult]:
        """
        Geocodifica cidade/estado; retorna apenas o primeiro resultado ou None

        Raises:
            WeatherProviderException / ProviderTimeoutException
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'open-meteo')"""
        pass
