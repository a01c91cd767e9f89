from .plugin import OrganicLayoutPlugin

__all__ = ['OrganicLayoutPlugin']
