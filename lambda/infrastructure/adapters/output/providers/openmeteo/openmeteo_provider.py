"""Open-Meteo Provider - Implementação do provider para Open-Meteo API (forecast + geocoding)"""

import asyncio
from typing import Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import (
    ForecastPayload,
    GeocodingResult,
    IWeatherProvider
)
from domain.constants import API, App, BrazilianStates, Providers
from domain.exceptions import ProviderTimeoutException, WeatherProviderException
from infrastructure.adapters.output.providers.http_fetch import fetch_json
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from shared.config import settings
from shared.config.aiohttp_session_manager import get_aiohttp_session_manager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoProvider(IWeatherProvider):
    """
    Provider para Open-Meteo Forecast e Geocoding API

    Características:
    - API gratuita, sem chave
    - Condições atuais (temperatura, umidade, sensação) + mín/máx diárias
    - Geocodificação por nome de cidade (Brasil), preferindo o estado do CEP
    - Sem cache aqui: o cache de previsões fica no WeatherService
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        geocoding_url: Optional[str] = None
    ):
        self.base_url = (base_url or settings.OPENMETEO_BASE_URL).rstrip('/')
        self.geocoding_url = geocoding_url or settings.OPENMETEO_GEOCODING_URL

        # Usar gerenciador centralizado de sessão HTTP
        self.session_manager = get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @property
    def provider_name(self) -> str:
        return Providers.OPENMETEO

    async def _get(self, url: str, params: dict, timeout: Optional[float], operation: str):
        try:
            _, data = await fetch_json(self.session_manager, url, params=params, timeout=timeout)
            return data
        except asyncio.TimeoutError as e:
            logger.error("Open-Meteo timeout", operation=operation)
            raise ProviderTimeoutException(
                "Timeout ao consultar Open-Meteo",
                details={"provider": self.provider_name, "operation": operation}
            ) from e
        except aiohttp.ClientResponseError as e:
            logger.error("Open-Meteo returned error status", operation=operation, status=e.status)
            raise WeatherProviderException(
                f"Open-Meteo retornou status {e.status}",
                details={"provider": self.provider_name, "operation": operation, "status": e.status}
            ) from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.error("Open-Meteo request failed", operation=operation, error=str(e))
            raise WeatherProviderException(
                "Erro ao consultar Open-Meteo",
                details={"provider": self.provider_name, "operation": operation, "error": str(e)}
            ) from e

    @tracer.wrap(resource="openmeteo.get_forecast")
    async def get_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int,
        timeout: Optional[float] = None
    ) -> Optional[ForecastPayload]:
        """
        Busca condições atuais e mín/máx diárias

        Flow:
        1. Chama /v1/forecast (async HTTP, retry em 429/503)
        2. Converte para ForecastPayload (seções ausentes → None)
        """
        url = f"{self.base_url}/forecast"
        params = {
            'latitude': latitude,
            'longitude': longitude,
            'current': ','.join([
                'temperature_2m',
                'relative_humidity_2m',
                'apparent_temperature'
            ]),
            'daily': ','.join([
                'temperature_2m_max',
                'temperature_2m_min'
            ]),
            'timezone': App.TIMEZONE,
            'forecast_days': days
        }

        logger.info("Querying Open-Meteo forecast", latitude=latitude, longitude=longitude, days=days)
        data = await self._get(url, params, timeout, operation="forecast")

        if not isinstance(data, dict):
            return None
        return OpenMeteoDataMapper.map_forecast_response(data)

    @tracer.wrap(resource="openmeteo.geocode")
    async def geocode(
        self,
        city: str,
        state: str,
        timeout: Optional[float] = None
    ) -> Optional[GeocodingResult]:
        """
        Geocodifica cidade (Brasil)

        Busca alguns candidatos e prefere o do estado (UF) do CEP,
        evitando cidades homônimas de outros estados.
        """
        params = {
            'name': city,
            'count': BrazilianStates.GEOCODING_CANDIDATES,
            'language': App.GEOCODING_LANGUAGE,
            'countryCode': App.COUNTRY_CODE
        }

        logger.info("Querying Open-Meteo geocoding", city=city, state=state)
        data = await self._get(self.geocoding_url, params, timeout, operation="geocode")

        result = OpenMeteoDataMapper.map_geocoding_response(data, state_name=BrazilianStates.name_of(state))
        if result is None:
            logger.warning("No geocoding result", city=city, state=state)
        return result


# Factory singleton
_openmeteo_provider_instance: Optional[OpenMeteoProvider] = None


def get_openmeteo_provider() -> OpenMeteoProvider:
    """Retorna instância singleton do OpenMeteoProvider"""
    global _openmeteo_provider_instance
    if _openmeteo_provider_instance is None:
        _openmeteo_provider_instance = OpenMeteoProvider()
    return _openmeteo_provider_instance
