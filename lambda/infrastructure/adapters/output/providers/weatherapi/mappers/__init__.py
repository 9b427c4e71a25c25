from .weatherapi_data_mapper import WeatherApiDataMapper

__all__ = ['WeatherApiDataMapper']
