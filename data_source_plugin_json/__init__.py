from .plugin import JsonDataSourcePlugin

__all__ = ['JsonDataSourcePlugin']
