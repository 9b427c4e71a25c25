#!/usr/bin/env python3
"""
Servidor Local / Container
Expõe os handlers Lambda (cep-service ou weather-service) via Flask

Como usar:
    cd lambda
    python local_server.py --service weather   # GET  http://localhost:8181/?cep=01310-100
    python local_server.py --service cep       # POST http://localhost:8080/  {"cep": "01310-100"}

Endpoints disponíveis (ambos os serviços):
    GET /metrics   formato Prometheus
    GET /health
"""
import argparse
import os
import signal
import sys
from datetime import datetime

from flask import Flask, request, jsonify

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

SERVICES = {
    'cep': ('CEP_SERVICE_NAME', 'cep-service', 'CEP_SERVICE_PORT', 8080),
    'weather': ('WEATHER_SERVICE_NAME', 'weather-service', 'WEATHER_SERVICE_PORT', 8181),
}

DISPATCH_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS']


class MockLambdaContext:
    """Contexto Lambda mínimo para execução fora da AWS"""
    def __init__(self, function_name: str):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = function_name
        self.function_version = "$LATEST"
        self.invoked_function_arn = f"arn:aws:lambda:local:000000000000:function:{function_name}"
        self.memory_limit_in_mb = "512"
        self.log_group_name = f"/aws/lambda/{function_name}"
        self.log_stream_name = "local"

    def get_remaining_time_in_millis(self):
        return 300000  # 5 minutos


def flask_to_lambda_event(flask_request):
    """Converte requisição Flask para evento Lambda/API Gateway"""
    query_string_parameters = {key: value for key, value in flask_request.args.items()}
    headers = {key: value for key, value in flask_request.headers.items()}

    # Corpo cru, qualquer que seja o Content-Type (form incluso)
    body = flask_request.get_data(as_text=True) or None

    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': headers,
        'queryStringParameters': query_string_parameters if query_string_parameters else None,
        'pathParameters': None,
        'body': body,
        'isBase64Encoded': False,
        'requestContext': {
            'accountId': '000000000000',
            'apiId': 'local',
            'protocol': 'HTTP/1.1',
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'stage': 'local',
            'requestId': f"local-{datetime.now().timestamp()}",
            'requestTime': datetime.now().isoformat(),
            'requestTimeEpoch': int(datetime.now().timestamp() * 1000),
            'identity': {
                'sourceIp': flask_request.headers.get('X-Real-Ip', flask_request.remote_addr),
                'userAgent': flask_request.headers.get('User-Agent', '')
            }
        }
    }


def lambda_to_flask_response(lambda_response):
    """Converte resposta Lambda para resposta Flask (corpo repassado sem re-serializar)"""
    status_code = lambda_response.get('statusCode', 200)
    headers = dict(lambda_response.get('headers') or {})
    for name, values in (lambda_response.get('multiValueHeaders') or {}).items():
        headers.setdefault(name, values[-1])
    body = lambda_response.get('body') or ''
    return body, status_code, headers


def create_app(service: str, handler) -> Flask:
    """
    Cria o app Flask que encaminha toda requisição para o handler Lambda do serviço

    Args:
        service: 'cep' ou 'weather'
        handler: lambda_handler do serviço
    """
    service_name = os.environ.get(SERVICES[service][0], SERVICES[service][1])
    app = Flask(service_name)

    def dispatch(path=''):
        event = flask_to_lambda_event(request)
        response = handler(event, MockLambdaContext(service_name))
        return lambda_to_flask_response(response)

    # Roteamento (inclusive 404 de rota/método) fica a cargo do resolver do serviço
    app.add_url_rule('/', 'dispatch_root', dispatch, methods=DISPATCH_METHODS)
    app.add_url_rule('/<path:path>', 'dispatch_path', dispatch, methods=DISPATCH_METHODS)

    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'service': service_name,
            'timestamp': datetime.now().isoformat()
        })

    return app


def _raise_keyboard_interrupt(signum, frame):
    raise KeyboardInterrupt


def main(argv=None):
    parser = argparse.ArgumentParser(description="Servidor HTTP dos serviços CEP / clima")
    parser.add_argument('--service', choices=sorted(SERVICES), default=os.environ.get('SERVICE', 'weather'))
    args = parser.parse_args(argv)

    name_env, default_name, port_env, default_port = SERVICES[args.service]
    service_name = os.environ.get(name_env, default_name)
    # Child loggers resolvem o serviço por SERVICE_NAME
    os.environ.setdefault('SERVICE_NAME', service_name)

    from shared.config import settings
    from shared.config.logger_config import get_logger
    from infrastructure.adapters.input.http_runtime import run_async
    from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager

    logger = get_logger(service_name)

    if args.service == 'weather':
        if not settings.WEATHER_API_KEY:
            logger.error("WEATHER_API_KEY is not set - refusing to start")
            sys.exit(1)
        from infrastructure.adapters.input.weather_handler import lambda_handler
    else:
        from infrastructure.adapters.input.cep_handler import lambda_handler

    app = create_app(args.service, lambda_handler)
    port = int(os.environ.get(port_env, default_port))

    signal.signal(signal.SIGTERM, _raise_keyboard_interrupt)

    logger.info("Starting server", service=service_name, host=settings.HOST, port=port)
    try:
        # werkzeug trata o KeyboardInterrupt e retorna normalmente
        app.run(host=settings.HOST, port=port, debug=False, use_reloader=False, threaded=True)
    finally:
        # TODO: repassar SHUTDOWN_GRACE_SECONDS a um servidor WSGI que drene conexões (werkzeug não drena)
        logger.info(
            "Shutting down gracefully, CTRL+C pressed...",
            grace_seconds=settings.SHUTDOWN_GRACE_SECONDS
        )
        run_async(get_aiohttp_session_manager().cleanup())


if __name__ == '__main__':
    main()
