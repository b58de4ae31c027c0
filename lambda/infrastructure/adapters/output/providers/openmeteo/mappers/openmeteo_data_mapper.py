"""
OpenMeteo Data Mapper - Transforma respostas da API Open-Meteo em payloads tipados
LOCALIZAÇÃO: infrastructure (transforma dados externos → portas da aplicação)
"""
from typing import Any, Dict, List, Optional

from application.ports.output.weather_provider_port import (
    CurrentPayload,
    DailyPayload,
    ForecastPayload,
    GeocodingResult
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _scalar(value: Any) -> Any:
    """Open-Meteo pode devolver valores 'current' como escalar ou lista de um item"""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _to_float(value: Any) -> Optional[float]:
    value = _scalar(value)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _float_list(values: Any) -> List[Optional[float]]:
    if not isinstance(values, list):
        return []
    return [_to_float(v) for v in values]


class OpenMeteoDataMapper:
    """Mapper de respostas Open-Meteo (forecast e geocoding)"""

    @staticmethod
    def map_forecast_response(data: Dict[str, Any]) -> ForecastPayload:
        """
        Converte resposta de /v1/forecast

        Seções 'current' ou 'daily' ausentes ficam como None no payload
        """
        current_data = data.get('current')
        daily_data = data.get('daily')

        current = None
        if isinstance(current_data, dict):
            time_value = _scalar(current_data.get('time'))
            current = CurrentPayload(
                time=str(time_value) if time_value is not None else None,
                temperature=_to_float(current_data.get('temperature_2m')),
                relative_humidity=_to_float(current_data.get('relative_humidity_2m')),
                apparent_temperature=_to_float(current_data.get('apparent_temperature'))
            )

        daily = None
        if isinstance(daily_data, dict):
            times = daily_data.get('time')
            daily = DailyPayload(
                time=[str(t) for t in times] if isinstance(times, list) else [],
                temperature_max=_float_list(daily_data.get('temperature_2m_max')),
                temperature_min=_float_list(daily_data.get('temperature_2m_min'))
            )

        return ForecastPayload(current=current, daily=daily)

    @staticmethod
    def map_geocoding_response(data: Dict[str, Any], state_name: Optional[str] = None) -> Optional[GeocodingResult]:
        """
        Resultado da busca; None quando 'results' vazio/ausente

        Com state_name, escolhe o primeiro resultado cujo admin1 é esse estado
        (cidades homônimas em outros estados são descartadas). Sem correspondência,
        usa o primeiro resultado.
        """
        results = data.get('results') if isinstance(data, dict) else None
        if not results:
            return None

        first = results[0]
        if state_name:
            wanted = state_name.casefold()
            matching = [r for r in results if str(r.get('admin1') or '').casefold() == wanted]
            if matching:
                first = matching[0]
            else:
                logger.warning(
                    "No geocoding result in requested state, using first result",
                    state=state_name,
                    admin1=first.get('admin1')
                )

        latitude = _to_float(first.get('latitude'))
        longitude = _to_float(first.get('longitude'))
        if latitude is None or longitude is None:
            logger.warning("Geocoding result without coordinates", name=first.get('name'))
            return None

        return GeocodingResult(
            latitude=latitude,
            longitude=longitude,
            name=first.get('name') or "",
            admin1=first.get('admin1') or "",
            country=first.get('country') or ""
        )
