"""
Plugin contracts — abstract base classes for plugins and host collaborators.
"""
from .base import DataSourcePlugin, LayoutPlugin, TextMeasurer, SelectionIdBuilder

__all__ = ['DataSourcePlugin', 'LayoutPlugin', 'TextMeasurer', 'SelectionIdBuilder']
