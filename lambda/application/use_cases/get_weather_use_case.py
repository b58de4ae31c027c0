"""
Use Case: Get Weather
Previsão para todos os CEPs salvos, mais recentes primeiro.
Chamadas por CEP rodam em paralelo (limitadas por semáforo) e a ordem
da saída é sempre a ordem de created_at decrescente.
"""
import asyncio
from typing import List, Optional

from ddtrace import tracer

from application.dtos.requests import GetWeatherRequest
from application.dtos.responses import FieldError, OperationResult
from application.ports.input.get_weather_port import IGetWeatherUseCase
from application.ports.output.zip_code_lookup_repository_port import IZipCodeLookupRepository
from application.services.weather_service import WeatherService
from domain.constants import Forecast
from domain.entities.weather_result import WeatherResult
from domain.entities.zip_code_lookup import ZipCodeLookup
from domain.exceptions import InvalidForecastDaysException
from shared.config.logger_config import get_logger
from shared.utils.validators import ForecastDaysValidator

logger = get_logger(child=True)

DAYS_MESSAGE = "O número de dias deve estar entre 1 e 7."
NO_LOOKUPS_MESSAGE = (
    "Nenhum CEP foi salvo ainda. Por favor, salve pelo menos um CEP antes de consultar o clima."
)
ALL_FAILED_MESSAGE = "Não foi possível obter informações de clima para os CEPs salvos"


class GetWeatherUseCase(IGetWeatherUseCase):
    """Clima dos CEPs salvos"""

    def __init__(
        self,
        weather_service: WeatherService,
        repository: IZipCodeLookupRepository,
        max_concurrency: int = Forecast.MAX_CONCURRENT_LOOKUPS
    ):
        self.weather_service = weather_service
        self.repository = repository
        self.max_concurrency = max_concurrency

    @tracer.wrap(resource="use_case.get_weather")
    async def execute(self, request: GetWeatherRequest, timeout: Optional[float] = None) -> OperationResult:
        try:
            days = ForecastDaysValidator.validate(request.days)
        except InvalidForecastDaysException as e:
            return OperationResult.validation_failed(
                DAYS_MESSAGE,
                errors=[FieldError(
                    field="days",
                    message=DAYS_MESSAGE,
                    attempted_value=e.details.get("attempted_value")
                )]
            )

        lookups = self.repository.find(lambda _: True)
        if not lookups:
            return OperationResult.not_found(NO_LOOKUPS_MESSAGE)

        ordered = sorted(lookups, key=lambda lookup: lookup.created_at, reverse=True)

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def fetch(lookup: ZipCodeLookup) -> Optional[WeatherResult]:
            async with semaphore:
                return await self._fetch_for_lookup(lookup, days, timeout)

        # Aguarda todos os itens; a primeira falha (na ordem de saída) sobe para o handler
        results = await asyncio.gather(*(fetch(lookup) for lookup in ordered), return_exceptions=True)
        for lookup, result in zip(ordered, results):
            if isinstance(result, BaseException):
                logger.error(
                    "Weather provider failed for saved zip code",
                    zip_code=lookup.zip_code,
                    lookup_id=lookup.id,
                    error=str(result),
                    error_type=type(result).__name__
                )
                raise result

        weather_list: List[dict] = [
            result.to_api_response() for result in results if result is not None
        ]

        if not weather_list:
            logger.error("Weather unavailable for all saved zip codes", total=len(ordered))
            return OperationResult.internal_failure(ALL_FAILED_MESSAGE)

        logger.info(
            "Weather fetched for saved zip codes",
            total=len(ordered),
            succeeded=len(weather_list),
            days=days
        )
        return OperationResult.ok(weather_list)

    async def _fetch_for_lookup(
        self,
        lookup: ZipCodeLookup,
        days: int,
        timeout: Optional[float]
    ) -> Optional[WeatherResult]:
        """
        Busca clima de um CEP; None quando indisponível (item ignorado)

        Falhas de provider (WeatherProviderException / ProviderTimeoutException)
        propagam para o handler HTTP (500 / 504).
        """
        if lookup.has_coordinates():
            result = await self.weather_service.get_by_coordinates(
                lookup.latitude, lookup.longitude, days, timeout=timeout
            )
        else:
            result = await self.weather_service.get_by_city(
                lookup.city, lookup.state, days, timeout=timeout
            )

        if result is None:
            logger.warning(
                "Weather unavailable for saved zip code",
                zip_code=lookup.zip_code,
                lookup_id=lookup.id
            )
            return None

        return result.with_source(lookup.id, lookup.city, lookup.state)
