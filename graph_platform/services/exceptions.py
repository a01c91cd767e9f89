# graph_platform/services/exceptions.py

class ProjectionError(Exception):
    """Raised when a data view cannot be projected into graph sources."""
    pass

class HighlightAlignmentError(ProjectionError):
    """Raised when the aggregate series does not belong to the measure bound to a role."""
    pass

class DataViewFormatError(Exception):
    """Raised when a data source file does not describe a valid data view."""
    pass
