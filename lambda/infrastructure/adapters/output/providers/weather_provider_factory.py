"""
Weather Provider Factory - criação centralizada do provider único (Open-Meteo)
"""
from typing import Optional

from application.ports.output.weather_provider_port import IWeatherProvider
from infrastructure.adapters.output.providers.openmeteo import get_openmeteo_provider


class WeatherProviderFactory:
    """
    Factory simples para gerenciar o provider de clima.
    Mantém lazy-loading e singleton para reuso em execução quente da Lambda.
    """

    def __init__(self, provider: Optional[IWeatherProvider] = None):
        self._openmeteo: Optional[IWeatherProvider] = provider

    def get_weather_provider(self) -> IWeatherProvider:
        """Retorna provider padrão (Open-Meteo)."""
        if self._openmeteo is None:
            self._openmeteo = get_openmeteo_provider()
        return self._openmeteo


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory() -> WeatherProviderFactory:
    """Retorna singleton da factory (somente Open-Meteo)."""
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory()

    return _factory_instance
