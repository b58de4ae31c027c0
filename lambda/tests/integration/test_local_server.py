"""
Testes do servidor local (Flask -> evento API Gateway -> lambda_handler)
"""
import json

import pytest

import local_server


@pytest.fixture
def client(app_state):
    app = local_server.create_app()
    app.config['TESTING'] = True
    return app.test_client()


class TestLocalServer:

    def test_post_then_get_weather(self, client):
        response = client.post('/api/v1/cep', data=json.dumps({'zipCode': '01001-000'}),
                               content_type='application/json')
        assert response.status_code == 201

        response = client.get('/api/v1/weather?days=1')

        assert response.status_code == 200
        body = response.get_json()
        assert len(body['data']) == 1
        assert len(body['data'][0]['daily']) == 1

    def test_get_cep_passes_path_parameter(self, client):
        response = client.get('/api/v1/cep/01001-000')

        assert response.status_code == 200
        assert response.get_json()['data']['zipCode'] == '01001000'

    def test_correlation_header_forwarded(self, client):
        response = client.get('/api/v1/health', headers={'X-Correlation-ID': 'local-1'})

        assert response.status_code == 200
        assert response.headers['X-Correlation-ID'] == 'local-1'

    def test_unknown_route_lists_routes(self, client):
        response = client.get('/api/v2/nothing')

        assert response.status_code == 404
        assert 'GET /api/v1/health' in response.get_json()['routes']


class TestBuildFlaskResponse:

    def test_single_value_headers_override_multi_value(self):
        with local_server.create_app().app_context():
            response = local_server.build_flask_response({
                'statusCode': 409,
                'body': '{"success": false}',
                'multiValueHeaders': {'Content-Type': ['application/json'], 'X-Correlation-ID': ['old']},
                'headers': {'X-Correlation-ID': 'new'},
            })

        assert response.status_code == 409
        assert response.headers['X-Correlation-ID'] == 'new'
        assert response.mimetype == 'application/json'
