"""Profile entity."""

from dataclasses import dataclass

from profilekit.domain.validators import check_age, check_name, check_permissions
from profilekit.domain.value_objects import Permission


@dataclass(frozen=True)
class Profile:
    """User profile with a permission snapshot taken from its role at build time.

    Immutable. Use ``dataclasses.replace`` to derive a new profile; the
    replacement goes through the same checks.
    """

    name: str
    age: int
    role: str
    permissions: frozenset[Permission]

    def __post_init__(self) -> None:
        check_name(self.name)
        check_age(self.age)
        check_name(self.role, "role")
        object.__setattr__(self, "permissions", check_permissions(self.permissions))
