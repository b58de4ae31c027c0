from infrastructure.adapters.output.providers.viacep.mappers.viacep_mapper import ViaCepMapper

__all__ = ['ViaCepMapper']
