# graph_platform/services/role_resolver.py
"""
    RoleResolver — binds the semantic roles to the columns that fill them.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from graph_api.models.data_view import ColumnMetadata
from graph_api.types import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldBinding:
    """The column a role reads from"""
    field_name: str
    is_measure: bool = False


class RoleMap:
    """
    Fixed table with one slot per ``Role``.

    Only known roles can be stored; asking for an unknown role name
    yields ``None`` rather than a key error.
    """

    def __init__(self):
        self._bindings: Dict[Role, Optional[FieldBinding]] = {role: None for role in Role}

    def bind(self, role: Role, binding: FieldBinding) -> None:
        self._bindings[role] = binding

    def get(self, role) -> Optional[FieldBinding]:
        resolved = Role.parse(role)
        if resolved is None:
            return None
        return self._bindings[resolved]

    def __getitem__(self, role) -> Optional[FieldBinding]:
        return self.get(role)

    def __contains__(self, role) -> bool:
        return self.get(role) is not None

    def __iter__(self) -> Iterator[Tuple[Role, FieldBinding]]:
        """Iterate over the bound roles only"""
        for role, binding in self._bindings.items():
            if binding is not None:
                yield role, binding

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def to_dict(self) -> Dict[str, Dict]:
        return {
            role.value: {'fieldName': b.field_name, 'isMeasure': b.is_measure}
            for role, b in self
        }

    def __repr__(self) -> str:
        bound = ", ".join(f"{r.value}={b.field_name}" for r, b in self)
        return f"RoleMap({bound})"


class RoleResolver:
    """
    Builds a ``RoleMap`` from column metadata.

    Every role flagged ``True`` on a column is bound to that column's
    display name. When several columns claim a role, the last one wins.
    """

    def resolve(self, columns: Iterable[ColumnMetadata]) -> RoleMap:
        role_map = RoleMap()
        for column in columns:
            for role_name, flagged in (column.roles or {}).items():
                if flagged is not True:
                    continue
                role = Role.parse(role_name)
                if role is None:
                    logger.debug("Ignoring unknown role '%s' on column '%s'.",
                                 role_name, column.display_name)
                    continue
                role_map.bind(role, FieldBinding(
                    field_name=column.display_name,
                    is_measure=column.is_measure is True,
                ))
        return role_map
