"""Shared configuration"""
from .settings import WEATHER_CACHE_TTL_SECONDS, WEATHER_CACHE_ENABLED, DEBUG
from .logger_config import get_logger, logger, bind_correlation_id

__all__ = [
    'WEATHER_CACHE_TTL_SECONDS',
    'WEATHER_CACHE_ENABLED',
    'DEBUG',
    'get_logger',
    'logger',
    'bind_correlation_id'
]
