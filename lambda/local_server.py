#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Flask recebe a requisição, monta um evento API Gateway (REST) e chama o lambda_handler

Como usar:
    cd lambda
    WEATHER_API_KEY=<chave> python local_server.py   # sem chave usa dados mock

    curl "http://localhost:8000/weather?city=London"
    curl "http://localhost:8000/weather/cache/stats"
    curl -X DELETE "http://localhost:8000/weather/cache"
    curl "http://localhost:8000/health/detailed"
"""
import atexit
import json
import os
import sys
import time
import uuid

from flask import Flask, Response, request
from flask_cors import CORS

# Pacotes da aplicação ficam ao lado deste arquivo
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lambda_function import lambda_handler, shutdown

app = Flask(__name__)
CORS(app)


class LocalContext:
    """Contexto mínimo exigido por logger.inject_lambda_context"""
    function_name = "weather-cache-api-local"
    function_version = "$LATEST"
    invoked_function_arn = "arn:aws:lambda:local:000000000000:function:weather-cache-api-local"
    memory_limit_in_mb = 256

    def __init__(self):
        self.aws_request_id = str(uuid.uuid4())

    @staticmethod
    def get_remaining_time_in_millis():
        return 30000


def to_api_gateway_event(req) -> dict:
    """Requisição Flask → evento API Gateway REST (proxy integration)"""
    return {
        'resource': req.path,
        'path': req.path,
        'httpMethod': req.method,
        'headers': dict(req.headers),
        'queryStringParameters': req.args.to_dict() or None,
        'body': req.get_data(as_text=True) or None,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'local',
            'requestTimeEpoch': int(time.time() * 1000),
            'identity': {
                'sourceIp': req.remote_addr,
                'userAgent': req.headers.get('User-Agent', '')
            }
        }
    }


def to_flask_response(result: dict) -> Response:
    """Resposta do handler → Response Flask (headers + multiValueHeaders)"""
    headers = {
        name: values[-1]
        for name, values in (result.get('multiValueHeaders') or {}).items()
        if values
    }
    headers.update(result.get('headers') or {})
    headers.pop('Content-Length', None)

    return Response(
        response=result.get('body') or '',
        status=result.get('statusCode', 200),
        headers=headers
    )


@app.route('/', defaults={'path': ''}, methods=['GET', 'DELETE'])
@app.route('/<path:path>', methods=['GET', 'DELETE'])
def proxy(path):
    """Todas as rotas vão para o handler; o roteamento é do Powertools"""
    return to_flask_response(lambda_handler(to_api_gateway_event(request), LocalContext()))


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '127.0.0.1')
    provider = 'OpenWeather' if os.environ.get('WEATHER_API_KEY') else 'mock'

    print(json.dumps({'msg': 'Weather Cache API local server', 'url': f'http://{host}:{port}', 'provider': provider}))

    atexit.register(shutdown)

    # Requisições serializadas; o event loop do handler roda na própria thread daemon
    app.run(host=host, port=port, debug=False, threaded=False)
