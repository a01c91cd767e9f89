from .plugin import CsvDataSourcePlugin

__all__ = ['CsvDataSourcePlugin']
