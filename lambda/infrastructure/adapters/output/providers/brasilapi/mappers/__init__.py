from infrastructure.adapters.output.providers.brasilapi.mappers.brasilapi_mapper import BrasilApiMapper

__all__ = ['BrasilApiMapper']
