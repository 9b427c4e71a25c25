"""
Lambda Function Handlers - Clean Architecture
Delega para os adapters HTTP de cada serviço
"""
from infrastructure.adapters.input.cep_handler import lambda_handler as cep_lambda_handler
from infrastructure.adapters.input.weather_handler import lambda_handler as weather_lambda_handler

# Exportar handlers para serem usados pela AWS Lambda
__all__ = ['cep_lambda_handler', 'weather_lambda_handler']
