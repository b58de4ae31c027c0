"""
Unit Tests: WarmupService
"""
import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.adapters.input.warmup_service import WarmupService


@pytest.fixture
def deps():
    provider = MagicMock()
    provider.session_manager.get_session = AsyncMock()

    cep_factory = MagicMock()
    cep_factory.get_primary_provider.return_value = provider
    cep_factory.get_fallback_provider.return_value = provider

    weather_factory = MagicMock()
    weather_factory.get_weather_provider.return_value = provider

    def run_async(coro):
        return asyncio.run(coro)

    return {
        'logger': MagicMock(),
        'get_or_create_event_loop': MagicMock(),
        'run_async': run_async,
        'get_cep_provider_factory': MagicMock(return_value=cep_factory),
        'get_weather_provider_factory': MagicMock(return_value=weather_factory),
        'get_repository': MagicMock(),
        'get_cache': MagicMock(),
        'provider': provider,
    }


@pytest.fixture
def service(deps):
    kwargs = {k: v for k, v in deps.items() if k != 'provider'}
    return WarmupService(**kwargs)


class TestHandleWarmupPing:

    @pytest.mark.parametrize('event', [{'warmup': True}, {'source': 'aws.events'}])
    def test_ping_short_circuits(self, service, deps, event):
        response = service.handle_warmup_ping(event)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'ok': True, 'warmup': True}
        deps['get_repository'].assert_called_once()
        deps['get_cache'].assert_called_once()

    @pytest.mark.parametrize('event', [None, 'ping', {'httpMethod': 'GET', 'path': '/api/v1/health'}])
    def test_regular_events_pass_through(self, service, event):
        assert service.handle_warmup_ping(event) is None


class TestWarmupInit:

    def test_opens_shared_http_session_once(self, service, deps):
        service.warmup_init()

        # os três providers compartilham o mesmo session manager
        deps['provider'].session_manager.get_session.assert_awaited_once()

    def test_sync_failure_is_logged_not_raised(self, service, deps):
        deps['get_cep_provider_factory'].side_effect = RuntimeError("boom")

        service.warmup_init()

        deps['logger'].warning.assert_called_once()
        deps['get_repository'].assert_not_called()


class TestIsWarmupEvent:

    @pytest.mark.parametrize('event,expected', [
        ({'warmup': True}, True),
        ({'source': 'aws.events', 'detail-type': 'Scheduled Event'}, True),
        ({'warmup': False}, False),
        ({'source': 'aws.s3'}, False),
        ([], False),
    ])
    def test_detection(self, event, expected):
        assert WarmupService.is_warmup_event(event) is expected
