"""Role entity."""

from dataclasses import dataclass, field

from profilekit.domain.validators import check_name, check_permissions
from profilekit.domain.value_objects import Permission


@dataclass(frozen=True)
class Role:
    """Role - named set of permissions (admin, editor, viewer, ...)."""

    name: str
    permissions: frozenset[Permission] = field(default_factory=frozenset)
    description: str = ""

    def __post_init__(self) -> None:
        check_name(self.name, "role name")
        object.__setattr__(self, "permissions", check_permissions(self.permissions))
