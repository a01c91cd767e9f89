"""
    Role support: the closed set of semantic roles a column can fill,
    plus value normalization shared by every role lookup.
"""
from enum import Enum
from typing import Any, Optional


class Role(Enum):
    NODE_ID = "NodeId"
    TARGET_ID = "TargetId"
    NODE_MAIN_LABEL = "NodeMainLabel"
    NODE_SECOND_LABEL = "NodeSecondLabel"
    NODE_SHAPE = "NodeShape"
    EDGE_LABEL = "EdgeLabel"
    NODE_TOP_LABEL = "NodeTopLabel"

    @classmethod
    def parse(cls, name: Any) -> Optional['Role']:
        """Return the role for a role name, or None if the name is not a known role"""
        if isinstance(name, Role):
            return name
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def names(cls):
        return [role.value for role in cls]


class ValueNormalizer:
    """Conversion of raw cell values into the text form used by projections"""

    @staticmethod
    def to_text(value: Any) -> Optional[str]:
        """Missing cells stay None, everything else becomes a string"""
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            # 3.0 coming from an aggregate must match the categorical "3"
            return str(int(value))
        return str(value)
