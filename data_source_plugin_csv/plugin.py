import csv
import logging
from typing import List, Optional

from graph_api.plugins import DataSourcePlugin
from graph_api.models.data_view import ColumnMetadata, DataView
from graph_api.types import Role
from graph_platform.services.exceptions import DataViewFormatError

logger = logging.getLogger(__name__)


class CsvDataSourcePlugin(DataSourcePlugin):
    """
    DataSourcePlugin for CSV files.

    Role bindings are read from the header row:
        NodeId                         column "NodeId", bound to NodeId
        Employee:NodeId|NodeMainLabel  column "Employee", bound to both roles
        *Headcount:EdgeLabel           measure column "Headcount"
    Empty cells become None.
    """

    def get_plugin_name(self) -> str:
        return "CSV Table"

    def parse(self, file_path: str) -> DataView:
        with open(file_path, "r", encoding="utf-8-sig", newline="") as fh:
            reader = csv.reader(fh)
            header = next(reader, None)
            if header is None:
                return DataView.from_rows([], [])

            columns = [self._parse_header(cell) for cell in header]
            rows = []
            for line_no, record in enumerate(reader, start=2):
                if not record:
                    continue
                if len(record) > len(columns):
                    raise DataViewFormatError(
                        f"{file_path}:{line_no}: {len(record)} cells but {len(columns)} columns."
                    )
                rows.append([cell if cell != "" else None for cell in record])

        logger.debug("Parsed %d rows from '%s'.", len(rows), file_path)
        return DataView.from_rows(columns, rows)

    @staticmethod
    def _parse_header(cell: str) -> ColumnMetadata:
        text = cell.strip()
        is_measure = text.startswith("*")
        if is_measure:
            text = text[1:].strip()
        if not text:
            raise DataViewFormatError("Header cells cannot be empty.")

        name, roles = text, CsvDataSourcePlugin._parse_roles(text)
        if roles is None:
            # "Name:Role|Role" binds the roles after the last colon
            head, sep, tail = text.rpartition(":")
            suffix_roles = CsvDataSourcePlugin._parse_roles(tail) if sep else None
            if suffix_roles is not None and head.strip():
                name, roles = head.strip(), suffix_roles
            else:
                roles = []

        return ColumnMetadata(
            display_name=name,
            roles={role.value: True for role in roles},
            is_measure=is_measure,
        )

    @staticmethod
    def _parse_roles(text: str) -> Optional[List[Role]]:
        """All '|'-separated parts as roles, or None if any part is not a role."""
        roles = [Role.parse(part.strip()) for part in text.split("|")]
        if not roles or any(role is None for role in roles):
            return None
        return roles
