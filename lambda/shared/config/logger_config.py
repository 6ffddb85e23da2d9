"""
Logging estruturado (AWS Lambda Powertools)
Service name vem de SERVICE_NAME; nível de LOG_LEVEL (default INFO)
"""
import os

from aws_lambda_powertools import Logger

from domain.constants import App


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Cria Logger da aplicação

    Módulos usam child=True para herdar handlers e contexto de correlação
    (request_id) do logger principal.
    """
    service = service_name or os.environ.get('SERVICE_NAME', App.SERVICE_NAME)

    if child:
        return Logger(service=service, child=True)

    return Logger(service=service, level=os.environ.get('LOG_LEVEL', 'INFO'))


logger = get_logger()
