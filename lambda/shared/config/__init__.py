"""Shared configuration"""
from .settings import CEP_SERVICE_NAME, WEATHER_SERVICE_NAME, REQUEST_TIMEOUT_SECONDS, TRACE_ADDRESS_STAGE
from .logger_config import get_logger, logger

__all__ = [
    'CEP_SERVICE_NAME',
    'WEATHER_SERVICE_NAME',
    'REQUEST_TIMEOUT_SECONDS',
    'TRACE_ADDRESS_STAGE',
    'get_logger',
    'logger'
]
