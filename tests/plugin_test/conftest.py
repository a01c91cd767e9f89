import pytest
from pathlib import Path

from data_source_plugin_csv.plugin import CsvDataSourcePlugin
from data_source_plugin_json.plugin import JsonDataSourcePlugin

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def csv_plugin():
    return CsvDataSourcePlugin()


@pytest.fixture
def json_plugin():
    return JsonDataSourcePlugin()


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to a temporary file and return its path as a string."""
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
