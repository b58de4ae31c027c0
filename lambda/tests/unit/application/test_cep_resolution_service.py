"""
Testes Unitários - CepResolutionService (primário com fallback)
"""
import asyncio

import pytest

from application.services.cep_resolution_service import CepResolutionService
from domain.exceptions import CepProviderException, ProviderTimeoutException
from domain.value_objects.zip_code import ZipCode


@pytest.fixture
def zip_code():
    return ZipCode.create("01001000")


class TestCepResolutionServiceConstruction:
    def test_requires_primary(self, mock_cep_provider):
        with pytest.raises(ValueError):
            CepResolutionService(primary=None, fallback=mock_cep_provider("viacep"))

    def test_requires_fallback(self, mock_cep_provider):
        with pytest.raises(ValueError):
            CepResolutionService(primary=mock_cep_provider("brasilapi"), fallback=None)


class TestCepResolutionService:

    @pytest.mark.asyncio
    async def test_primary_hit_skips_fallback(self, zip_code, mock_cep_provider, make_cep_result):
        primary = mock_cep_provider("brasilapi", result=make_cep_result())
        fallback = mock_cep_provider("viacep")
        service = CepResolutionService(primary, fallback)

        result = await service.resolve(zip_code)

        assert result.provider == "brasilapi"
        fallback.lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_primary_none_uses_fallback(self, zip_code, mock_cep_provider, make_cep_result):
        primary = mock_cep_provider("brasilapi", result=None)
        fallback = mock_cep_provider("viacep", result=make_cep_result(provider="viacep", location=None))
        service = CepResolutionService(primary, fallback)

        result = await service.resolve(zip_code)

        assert result.provider == "viacep"
        fallback.lookup.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        CepProviderException("boom"),
        ProviderTimeoutException("slow"),
        RuntimeError("unexpected")
    ])
    async def test_primary_error_is_swallowed(self, zip_code, mock_cep_provider, make_cep_result, error):
        primary = mock_cep_provider("brasilapi", side_effect=error)
        fallback = mock_cep_provider("viacep", result=make_cep_result(provider="viacep"))
        service = CepResolutionService(primary, fallback)

        result = await service.resolve(zip_code)

        assert result.provider == "viacep"

    @pytest.mark.asyncio
    async def test_both_none(self, zip_code, mock_cep_provider):
        service = CepResolutionService(
            mock_cep_provider("brasilapi", result=None),
            mock_cep_provider("viacep", result=None)
        )

        assert await service.resolve(zip_code) is None

    @pytest.mark.asyncio
    async def test_fallback_error_propagates(self, zip_code, mock_cep_provider):
        service = CepResolutionService(
            mock_cep_provider("brasilapi", side_effect=CepProviderException("down")),
            mock_cep_provider("viacep", side_effect=ProviderTimeoutException("slow"))
        )

        with pytest.raises(ProviderTimeoutException):
            await service.resolve(zip_code)

    @pytest.mark.asyncio
    async def test_cancellation_not_swallowed(self, zip_code, mock_cep_provider):
        fallback = mock_cep_provider("viacep")
        service = CepResolutionService(
            mock_cep_provider("brasilapi", side_effect=asyncio.CancelledError()),
            fallback
        )

        with pytest.raises(asyncio.CancelledError):
            await service.resolve(zip_code)

        fallback.lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_forwarded_to_providers(self, zip_code, mock_cep_provider):
        primary = mock_cep_provider("brasilapi", result=None)
        fallback = mock_cep_provider("viacep", result=None)
        service = CepResolutionService(primary, fallback)

        await service.resolve(zip_code, timeout=1.5)

        primary.lookup.assert_awaited_once_with(zip_code, timeout=1.5)
        fallback.lookup.assert_awaited_once_with(zip_code, timeout=1.5)
