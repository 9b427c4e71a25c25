"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_cep_temperature_use_case import GetCepTemperatureUseCase
from .forward_cep_temperature_use_case import ForwardCepTemperatureUseCase

__all__ = [
    'GetCepTemperatureUseCase',
    'ForwardCepTemperatureUseCase'
]
