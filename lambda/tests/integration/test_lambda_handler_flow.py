"""
Testes de integração do Lambda - CEP + Clima API
Fluxo completo pelo lambda_handler (Powertools) com providers mockados
Executar: pytest lambda/tests/integration -v
"""
import json
from unittest.mock import MagicMock

import pytest

from domain.exceptions import ProviderTimeoutException, WeatherProviderException
from infrastructure.adapters.input import lambda_handler as handler_module
from infrastructure.adapters.input.lambda_handler import lambda_handler
from tests.integration.api_events import (
    build_add_cep_event,
    build_api_gateway_event,
    build_get_cep_event,
    build_weather_event,
    forecast_payload,
    response_header
)


def invoke(event, context):
    response = lambda_handler(event, context)
    return response, json.loads(response['body'])


class TestGetCepEndpoint:
    """Testes do endpoint GET /api/v1/cep/{zipCode}"""

    def test_get_cep_success(self, app_state, mock_context):
        response, body = invoke(build_get_cep_event('01001-000'), mock_context)

        assert response['statusCode'] == 200
        assert body['success'] is True
        assert body['data']['zipCode'] == '01001000'
        assert body['data']['city'] == 'São Paulo'
        assert body['data']['location'] == {'latitude': -23.5505, 'longitude': -46.6333}

    def test_get_cep_does_not_persist(self, app_state, mock_context):
        invoke(build_get_cep_event('01001000'), mock_context)

        assert app_state['repository'].count() == 0

    def test_invalid_cep_returns_400(self, app_state, mock_context):
        response, body = invoke(build_get_cep_event('123'), mock_context)

        assert response['statusCode'] == 400
        assert body['success'] is False
        assert body['errors'][0]['field'] == 'zipCode'
        app_state['primary'].lookup.assert_not_awaited()

    def test_unknown_cep_returns_404(self, app_state, mock_context):
        response, body = invoke(build_get_cep_event('99999999'), mock_context)

        assert response['statusCode'] == 404
        assert body['success'] is False
        app_state['fallback'].lookup.assert_awaited_once()


class TestAddCepEndpoint:
    """Testes do endpoint POST /api/v1/cep"""

    def test_add_cep_returns_201_then_409(self, app_state, mock_context):
        response, body = invoke(build_add_cep_event({'zipCode': '01001-000'}), mock_context)

        assert response['statusCode'] == 201
        assert body['data']['zipCode'] == '01001000'
        assert body['data']['id']
        saved_id = body['data']['id']

        response, body = invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)

        assert response['statusCode'] == 409
        assert body['message'] == 'CEP já está persistido no banco de dados'
        assert body['data']['id'] == saved_id
        assert app_state['repository'].count() == 1

    def test_missing_zip_code_returns_400(self, app_state, mock_context):
        response, body = invoke(build_add_cep_event({}), mock_context)

        assert response['statusCode'] == 400
        assert body['errors'][0]['field'] == 'zipCode'

    def test_unknown_cep_returns_404(self, app_state, mock_context):
        response, _ = invoke(build_add_cep_event({'zipCode': '99999999'}), mock_context)

        assert response['statusCode'] == 404
        assert app_state['repository'].count() == 0

    def test_malformed_json_returns_400(self, app_state, mock_context):
        response, body = invoke(build_add_cep_event('{"zipCode": '), mock_context)

        assert response['statusCode'] == 400
        assert body['status'] == 400
        assert body['traceId']

    def test_provider_timeout_returns_504_with_trace_id(self, app_state, mock_context):
        timeout = ProviderTimeoutException("Timeout ao consultar provider de CEP")
        app_state['primary'].lookup.side_effect = timeout
        app_state['fallback'].lookup.side_effect = timeout

        event = build_add_cep_event({'zipCode': '01001000'}, headers={'X-Correlation-ID': 'corr-504'})
        response, body = invoke(event, mock_context)

        assert response['statusCode'] == 504
        assert body['status'] == 504
        assert body['traceId'] == 'corr-504'
        assert app_state['repository'].count() == 0


class TestWeatherEndpoint:
    """Testes do endpoint GET /api/v1/weather"""

    def test_no_saved_zip_codes_returns_404(self, app_state, mock_context):
        response, body = invoke(build_weather_event(), mock_context)

        assert response['statusCode'] == 404
        assert body['success'] is False

    @pytest.mark.parametrize('days', ['0', '8', '9', 'abc'])
    def test_invalid_days_returns_400(self, app_state, mock_context, days):
        invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)

        response, body = invoke(build_weather_event(days=days), mock_context)

        assert response['statusCode'] == 400
        assert body['message'] == 'O número de dias deve estar entre 1 e 7.'
        assert body['errors'][0]['field'] == 'days'

    def test_weather_for_all_saved_newest_first(self, app_state, mock_context):
        for zip_code in ('01001000', '20040020', '30130010'):
            response, _ = invoke(build_add_cep_event({'zipCode': zip_code}), mock_context)
            assert response['statusCode'] == 201

        response, body = invoke(build_weather_event(days='2'), mock_context)

        assert response['statusCode'] == 200
        assert len(body['data']) == 3

        expected_order = [
            lookup.id for lookup in sorted(
                app_state['repository'].get_all(),
                key=lambda lookup: lookup.created_at,
                reverse=True
            )
        ]
        assert [item['sourceZipCodeId'] for item in body['data']] == expected_order

        for item in body['data']:
            assert len(item['daily']) == 2
            assert 0 <= item['current']['humidity'] <= 1

        # CEP sem coordenadas (ViaCEP) resolvido via geocodificação
        by_city = {item['location']['city']: item for item in body['data']}
        assert by_city['Belo Horizonte']['location']['state'] == 'MG'
        app_state['weather_provider'].geocode.assert_awaited_once()

    def test_default_days_is_three(self, app_state, mock_context):
        invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)

        response, body = invoke(build_weather_event(), mock_context)

        assert response['statusCode'] == 200
        assert len(body['data'][0]['daily']) == 3

    def test_second_request_served_from_cache(self, app_state, mock_context):
        invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)

        invoke(build_weather_event(days='3'), mock_context)
        invoke(build_weather_event(days='3'), mock_context)

        assert app_state['weather_provider'].get_forecast.await_count == 1

    def test_weather_timeout_returns_504_problem_details(self, app_state, mock_context):
        for zip_code in ('01001000', '20040020'):
            invoke(build_add_cep_event({'zipCode': zip_code}), mock_context)

        async def get_forecast(latitude, longitude, days, timeout=None):
            if latitude == -23.5505:
                raise ProviderTimeoutException("Timeout ao consultar Open-Meteo")
            return forecast_payload(latitude, days)

        app_state['weather_provider'].get_forecast.side_effect = get_forecast

        event = build_api_gateway_event(
            method='GET', path='/api/v1/weather', resource='/api/v1/weather',
            headers={'X-Correlation-ID': 'corr-weather-504'}
        )
        response, body = invoke(event, mock_context)

        assert response['statusCode'] == 504
        assert body['status'] == 504
        assert body['type'] == 'ProviderTimeoutException'
        assert body['traceId'] == 'corr-weather-504'

    def test_weather_provider_error_returns_500_problem_details(self, app_state, mock_context):
        invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)
        app_state['weather_provider'].get_forecast.side_effect = WeatherProviderException(
            "Open-Meteo retornou status 500"
        )

        response, body = invoke(build_weather_event(), mock_context)

        assert response['statusCode'] == 500
        assert body['status'] == 500
        assert body['title'] == 'Erro interno do servidor'
        assert 'success' not in body

    def test_all_unavailable_returns_500(self, app_state, mock_context):
        invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)
        app_state['weather_provider'].get_forecast.side_effect = None
        app_state['weather_provider'].get_forecast.return_value = None

        response, body = invoke(build_weather_event(), mock_context)

        assert response['statusCode'] == 500
        assert body['success'] is False


class TestCrossCutting:
    """Correlation id, health e warm-up"""

    def test_correlation_id_is_echoed(self, app_state, mock_context):
        event = build_get_cep_event('01001000', headers={'X-Correlation-ID': 'abc-123'})

        response, _ = invoke(event, mock_context)

        assert response_header(response, 'X-Correlation-ID') == 'abc-123'

    def test_correlation_id_generated_when_missing(self, app_state, mock_context):
        response, _ = invoke(build_get_cep_event('01001000'), mock_context)

        assert response_header(response, 'X-Correlation-ID')

    def test_health_check(self, app_state, mock_context):
        invoke(build_add_cep_event({'zipCode': '01001000'}), mock_context)

        event = build_api_gateway_event(method='GET', path='/api/v1/health', resource='/api/v1/health')
        response, body = invoke(event, mock_context)

        assert response['statusCode'] == 200
        assert body['status'] == 'healthy'
        assert body['savedZipCodes'] == 1

    def test_unknown_route_returns_404(self, app_state, mock_context):
        event = build_api_gateway_event(method='GET', path='/api/v1/unknown', resource='/api/v1/unknown')

        response = lambda_handler(event, mock_context)

        assert response['statusCode'] == 404

    def test_warmup_ping_short_circuits(self, app_state, mock_context, monkeypatch):
        warmup_init = MagicMock()
        monkeypatch.setattr(handler_module.warmup_service, 'warmup_init', warmup_init)

        response, body = invoke({'source': 'aws.events'}, mock_context)

        assert response['statusCode'] == 200
        assert body == {'ok': True, 'warmup': True}
        warmup_init.assert_called_once()
        app_state['primary'].lookup.assert_not_awaited()
