"""
    Abstract base classes for plugins and host collaborators.
    Defines the "Contract" that every implementation must follow.
"""
from abc import ABC, abstractmethod
from typing import Any

from ..models.data_view import CategoryColumn, DataView
from ..models.geometry import Size
from ..models.graph import Graph
from ..models.label import Font
from ..models.selection import SelectionId


class DataSourcePlugin(ABC):
    """
        Abstract base class for Data Source plugins.
        Pattern: Strategy (for data loading).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the plugin.
            Example: "CSV Table"
        """
        pass

    @abstractmethod
    def parse(self, file_path: str) -> DataView:
        """
        Main method: Parses a file and returns a tabular snapshot.

        Args:
            file_path: Path to the file to be loaded.

        Returns:
            DataView: column metadata with role flags plus the column data.
        """
        pass


class LayoutPlugin(ABC):
    """
        Abstract base class for Layout plugins.
        Pattern: Strategy (for arranging the diagram).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the layout.
            Example: "Organic Layout"
        """
        pass

    @abstractmethod
    def arrange(self, graph: Graph, config: Any) -> None:
        """
        Main method: moves the nodes and routes the edges of the graph in place.

        Args:
            graph:  The assembled graph.
            config: Layout settings (minimum node / edge distances and the like).
        """
        pass


class TextMeasurer(ABC):
    """Measures the rendered size of a label text"""

    @abstractmethod
    def measure_text(self, text: str, font: Font) -> Size:
        pass


class SelectionIdBuilder(ABC):
    """
        Builds the opaque identity of a data row.
        Pattern: Builder; a fresh builder is used for every identity.
    """

    @abstractmethod
    def with_category(self, column: CategoryColumn, row_index: int) -> 'SelectionIdBuilder':
        pass

    @abstractmethod
    def create_selection_id(self) -> SelectionId:
        pass
