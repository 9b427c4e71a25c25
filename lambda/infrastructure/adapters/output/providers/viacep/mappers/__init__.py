from .viacep_data_mapper import ViaCepDataMapper

__all__ = ['ViaCepDataMapper']
