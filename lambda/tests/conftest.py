"""
Fixtures compartilhadas por todos os testes
Sem rede: providers HTTP são sempre mockados
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('POWERTOOLS_SERVICE_NAME', 'cep-weather-api-test')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

import pytest

from domain.constants import API


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    """Zera as esperas do retry (tenacity) para testes rápidos"""
    monkeypatch.setattr(API, 'HTTP_RETRY_WAIT_MIN', 0)
    monkeypatch.setattr(API, 'HTTP_RETRY_WAIT_MAX', 0)
    monkeypatch.setattr(API, 'HTTP_RETRY_MULTIPLIER', 0)


class FakeClock:
    """Relógio controlável para testes de TTL"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()
