"""
Entry point AWS Lambda (handler: lambda_function.lambda_handler)
Cold start já prepara providers, store, cache e sessão HTTP
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler, warmup_service

warmup_service.warmup_init()

__all__ = ['lambda_handler']
