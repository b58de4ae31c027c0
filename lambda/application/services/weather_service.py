"""
Serviço de clima: previsão por coordenadas (com cache TTL) e por cidade
(geocodificação + previsão). Exceções do provider são propagadas.
"""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ddtrace import tracer

from application.ports.output.cache_repository_port import ICacheRepository
from application.ports.output.weather_provider_port import ForecastPayload, IWeatherProvider
from domain.constants import App, Cache
from domain.entities.weather_result import (
    CurrentConditions,
    DailyTemperature,
    WeatherLocation,
    WeatherResult
)
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class WeatherService:
    """Coordena provider de clima e cache de previsões"""

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        cache: Optional[ICacheRepository] = None,
        ttl_seconds: int = Cache.TTL_WEATHER
    ):
        self.weather_provider = weather_provider
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def cache_key(latitude: float, longitude: float, days: int) -> str:
        return f"{Cache.PREFIX_WEATHER}{latitude}:{longitude}:{days}"

    def _cache_available(self) -> bool:
        return bool(self.cache and self.cache.is_enabled())

    @tracer.wrap(resource="service.weather.get_by_coordinates")
    async def get_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        days: int,
        timeout: Optional[float] = None
    ) -> Optional[WeatherResult]:
        """
        Previsão para coordenadas; cache hit retorna a instância cacheada

        Returns:
            WeatherResult ou None se o provider não retornou dados utilizáveis
        """
        key = self.cache_key(latitude, longitude, days)

        if self._cache_available():
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Weather cache HIT", cache_key=key)
                return cached

        payload = await self.weather_provider.get_forecast(latitude, longitude, days, timeout=timeout)
        if payload is None or not payload.is_complete():
            logger.warning(
                "Weather provider returned no usable payload",
                latitude=latitude,
                longitude=longitude,
                days=days
            )
            return None

        result = self._map_payload(payload, latitude, longitude, days)

        if self._cache_available():
            self.cache.set(key, result, self.ttl_seconds)

        return result

    @tracer.wrap(resource="service.weather.geocode")
    async def geocode(self, city: str, state: str, timeout: Optional[float] = None) -> Optional[Coordinates]:
        """Geocodifica cidade/estado (primeiro resultado)"""
        result = await self.weather_provider.geocode(city, state, timeout=timeout)
        if result is None:
            return None
        return Coordinates.from_raw(result.latitude, result.longitude)

    @tracer.wrap(resource="service.weather.get_by_city")
    async def get_by_city(
        self,
        city: str,
        state: str,
        days: int,
        timeout: Optional[float] = None
    ) -> Optional[WeatherResult]:
        """
        Previsão por cidade: geocodifica e consulta por coordenadas.
        Retorna cópia com cidade/estado informados (cache não é alterado).
        """
        coordinates = await self.geocode(city, state, timeout=timeout)
        if coordinates is None:
            logger.warning("City could not be geocoded", city=city, state=state)
            return None

        result = await self.get_by_coordinates(
            coordinates.latitude,
            coordinates.longitude,
            days,
            timeout=timeout
        )
        if result is None:
            return None

        return result.with_labels(city, state)

    @staticmethod
    def _map_payload(payload: ForecastPayload, latitude: float, longitude: float, days: int) -> WeatherResult:
        current = payload.current
        daily = payload.daily

        humidity = current.relative_humidity
        conditions = CurrentConditions(
            temperature_c=current.temperature,
            humidity=humidity / 100 if humidity is not None else None,
            apparent_temperature_c=current.apparent_temperature,
            observed_at=WeatherService._parse_observed_at(current.time)
        )

        available = min(len(daily.time), len(daily.temperature_min), len(daily.temperature_max))
        count = min(days, available)
        daily_temperatures = tuple(
            DailyTemperature(
                date=daily.time[i],
                temp_min_c=daily.temperature_min[i],
                temp_max_c=daily.temperature_max[i]
            )
            for i in range(count)
        )

        return WeatherResult(
            location=WeatherLocation(lat=latitude, lon=longitude),
            current=conditions,
            daily=daily_temperatures
        )

    @staticmethod
    def _parse_observed_at(value: Optional[str]) -> datetime:
        """Converte horário local (America/Sao_Paulo) do provider para UTC"""
        if not value:
            return datetime.now(timezone.utc)
        try:
            parsed = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            return datetime.now(timezone.utc)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=ZoneInfo(App.TIMEZONE))
        return parsed.astimezone(timezone.utc)
