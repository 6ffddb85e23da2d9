"""
Fixtures compartilhadas para testes de integração
O handler usa o provider mock (sem WEATHER_API_KEY) e sem limpeza periódica
"""
import os

import pytest

# Ambiente precisa estar pronto antes do import do lambda_handler
os.environ.pop('WEATHER_API_KEY', None)
os.environ['CACHE_CLEANUP_ENABLED'] = 'false'


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-cache-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:weather-cache-api'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-cache-api'
        self.log_stream_name = '2025/01/15/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()

