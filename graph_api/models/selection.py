"""
    Selection identity - opaque handle that ties a rendered node back
    to a row of the data view.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SelectionId:
    column_name: str
    row_index: int
    key: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {'column': self.column_name, 'row': self.row_index, 'key': self.key}
