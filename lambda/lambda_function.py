"""
Lambda Function Handler - Weather Cache API
Delega para o adapter HTTP
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler, shutdown

# Exportar lambda_handler para ser usado pela AWS Lambda
__all__ = ['lambda_handler', 'shutdown']
