#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Traduz requisições HTTP (Flask) em eventos API Gateway REST e chama o mesmo
lambda_handler usado na AWS.

Como usar:
    cd lambda
    python local_server.py

    curl http://localhost:8000/api/v1/cep/01001-000
    curl -X POST http://localhost:8000/api/v1/cep -d '{"zipCode": "01001-000"}'
    curl http://localhost:8000/api/v1/weather?days=3
"""
import json
import os
import sys
import uuid
from datetime import datetime, timezone

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from domain.constants import App  # noqa: E402
from lambda_function import lambda_handler  # noqa: E402

ROUTES = [
    ('GET', '/api/v1/cep/<zip_code>'),
    ('POST', '/api/v1/cep'),
    ('GET', '/api/v1/weather'),
    ('GET', '/api/v1/health'),
]


class LocalLambdaContext:
    """Contexto Lambda mínimo exigido pelo inject_lambda_context do Powertools"""
    function_name = "cep-weather-api-local"
    function_version = "$LATEST"
    invoked_function_arn = "arn:aws:lambda:local:000000000000:function:cep-weather-api-local"
    memory_limit_in_mb = "512"
    log_group_name = "/aws/lambda/cep-weather-api-local"
    log_stream_name = "local"

    def __init__(self):
        self.aws_request_id = str(uuid.uuid4())

    def get_remaining_time_in_millis(self):
        return 30000


def build_event(flask_request, context: LocalLambdaContext) -> dict:
    """Requisição Flask -> evento API Gateway (REST, payload v1)"""
    now = datetime.now(timezone.utc)
    raw_body = flask_request.get_data(as_text=True) or None

    return {
        'resource': flask_request.url_rule.rule if flask_request.url_rule else flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': dict(flask_request.headers),
        'pathParameters': dict(flask_request.view_args or {}) or None,
        'queryStringParameters': flask_request.args.to_dict() or None,
        'body': raw_body,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'local',
            'requestId': context.aws_request_id,
            'requestTimeEpoch': int(now.timestamp() * 1000),
            'identity': {'sourceIp': flask_request.remote_addr},
        },
    }


def build_flask_response(lambda_response: dict) -> Response:
    """Resposta Lambda -> Response Flask (headers simples sobrescrevem multiValueHeaders)"""
    headers = {
        name: values[-1]
        for name, values in (lambda_response.get('multiValueHeaders') or {}).items()
        if values
    }
    headers.update(lambda_response.get('headers') or {})
    content_type = headers.pop('Content-Type', 'application/json')

    return Response(
        response=lambda_response.get('body') or '',
        status=lambda_response.get('statusCode', 200),
        headers=headers,
        content_type=content_type,
    )


def create_app() -> Flask:
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}}, expose_headers=[App.CORRELATION_HEADER])

    def dispatch(**_path_params):
        context = LocalLambdaContext()
        return build_flask_response(lambda_handler(build_event(request, context), context))

    for method, rule in ROUTES:
        app.add_url_rule(rule, endpoint=f"{method} {rule}", view_func=dispatch, methods=[method])

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': f"Rota {request.path} não encontrada",
            'routes': [f"{method} {rule}" for method, rule in ROUTES],
        }), 404

    return app


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')

    print(f"CEP + Clima API local em http://{host}:{port}")
    for method, rule in ROUTES:
        print(f"   {method:5} {rule}")

    create_app().run(host=host, port=port, debug=True, use_reloader=True)
