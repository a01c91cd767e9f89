"""
    Generic base service for projecting a data view into source records.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a projection (fetch role columns → check the
    primary column → build records), letting concrete subclasses
    (NodeProjector, EdgeProjector) override specific steps.

    Genericity:
    ─────────────────────────
    Uses Generic[TItem] so each projector explicitly declares the record
    type it produces.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, TypeVar

from .column_accessor import ColumnAccessor

# Generic type variable for the produced record
TItem = TypeVar('TItem')


class SourceProjector(ABC, Generic[TItem]):
    """
    Abstract generic base for all services that turn role columns
    into a list of source records.

    Concrete subclasses must implement:
        - _fetch_columns(accessor) → keyword arguments for ``project``
        - project(**columns)       → list of records
    """

    def execute(self, accessor: ColumnAccessor) -> List[TItem]:
        """
        Template Method: fetch the role columns → project them.

        Args:
            accessor: Column accessor bound to the current data view and role map.

        Returns:
            The projected records; empty when the primary role is missing.
        """
        columns = self._fetch_columns(accessor)
        return self.project(**columns)

    @abstractmethod
    def _fetch_columns(self, accessor: ColumnAccessor) -> Dict[str, Any]:
        """
        Pull every role this projector needs from the accessor.
        """
        ...

    @abstractmethod
    def project(self, *args, **kwargs) -> List[TItem]:
        """
        Build the records from already fetched role values.
        """
        ...
