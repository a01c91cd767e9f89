import json
from typing import Any, Dict, List

from graph_api.plugins import DataSourcePlugin
from graph_api.models.data_view import ColumnMetadata, DataView
from graph_platform.services.exceptions import DataViewFormatError


class JsonDataSourcePlugin(DataSourcePlugin):
    """
    Reads a data view from a JSON document of the form

        {
          "columns": [{"displayName": "Employee", "roles": {"NodeId": true}, "isMeasure": false}, ...],
          "rows":    [["alice", ...], ...]
        }
    """

    def get_plugin_name(self) -> str:
        return "JSON Table"

    def parse(self, file_path: str) -> DataView:
        with open(file_path, "r", encoding="utf-8") as fh:
            data = json.load(fh)

        if not isinstance(data, dict):
            raise DataViewFormatError(f"{file_path}: top level must be an object.")

        columns = [self._parse_column(raw, i) for i, raw in enumerate(data.get("columns", []))]
        rows = self._parse_rows(data.get("rows", []), len(columns))
        return DataView.from_rows(columns, rows)

    # ── helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _parse_column(raw: Any, index: int) -> ColumnMetadata:
        if not isinstance(raw, dict) or "displayName" not in raw:
            raise DataViewFormatError(f"Column {index} needs a 'displayName'.")

        roles = raw.get("roles") or {}
        if not isinstance(roles, dict):
            raise DataViewFormatError(f"Column '{raw['displayName']}': 'roles' must be an object.")

        return ColumnMetadata(
            display_name=str(raw["displayName"]),
            roles={str(k): v is True for k, v in roles.items()},
            is_measure=raw.get("isMeasure") is True,
        )

    @staticmethod
    def _parse_rows(raw_rows: Any, width: int) -> List[List[Any]]:
        if not isinstance(raw_rows, list):
            raise DataViewFormatError("'rows' must be an array.")

        rows = []
        for i, row in enumerate(raw_rows):
            if not isinstance(row, list):
                raise DataViewFormatError(f"Row {i} must be an array.")
            if len(row) > width:
                raise DataViewFormatError(f"Row {i} has {len(row)} cells but only {width} columns.")
            rows.append(row)
        return rows


def print_test_data():
    plugin = JsonDataSourcePlugin()
    data_view = plugin.parse("tests/plugin_test/fixtures/org_chart.json")

    print(f"Plugin: {plugin.get_plugin_name()}")
    print(f"Rows: {data_view.row_count}")
    print()

    for column in data_view.columns:
        roles = [name for name, flagged in column.roles.items() if flagged]
        print(f"  {column.display_name:<12} roles={roles} measure={column.is_measure}")

if __name__ == '__main__':
    print_test_data()
