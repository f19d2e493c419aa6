"""Profile builder - accumulates fields and validates completeness on build."""

from collections.abc import Iterable

from profilekit.domain.entities import Profile, Role
from profilekit.domain.exceptions import BuilderStateError, IncompleteProfileError
from profilekit.domain.validators import check_age, check_name, check_permissions
from profilekit.domain.value_objects import Permission
from profilekit.logging import get_logger

logger = get_logger(__name__)

# Order in which missing fields are reported.
REQUIRED_FIELDS = ("name", "age", "role")


class ProfileBuilder:
    """Fluent accumulator for Profile fields.

    The builder knows nothing about which permissions a role grants; the
    caller passes the role name together with its resolved permissions.
    Setters check only their own field and return the builder, so calls can
    be chained in any order and repeated (last write wins).

    Extra permissions are deduplicated: adding one already granted by the
    role, or already added, changes nothing.
    """

    def __init__(self) -> None:
        self._clear()

    def _clear(self) -> None:
        self._name: str | None = None
        self._age: int | None = None
        self._role: str | None = None
        self._role_permissions: frozenset[Permission] = frozenset()
        self._extra_permissions: list[Permission] = []

    def with_name(self, name: str) -> "ProfileBuilder":
        self._name = check_name(name)
        return self

    def with_age(self, age: int) -> "ProfileBuilder":
        self._age = check_age(age)
        return self

    def with_role(self, role_name: str, permissions: Iterable[Permission]) -> "ProfileBuilder":
        """Set role and its resolved permissions. Drops extras added for a previous role."""
        role_name = check_name(role_name, "role name")
        self._role_permissions = check_permissions(permissions)
        self._role = role_name
        self._extra_permissions = []
        return self

    def with_role_value(self, role: Role) -> "ProfileBuilder":
        return self.with_role(role.name, role.permissions)

    def add_extra_permission(self, permission: Permission) -> "ProfileBuilder":
        """Grant one permission beyond the role's base set."""
        if self._role is None:
            raise BuilderStateError("Cannot add extra permission before a role is set")
        (permission,) = check_permissions((permission,))
        if permission not in self._role_permissions and permission not in self._extra_permissions:
            self._extra_permissions.append(permission)
        return self

    def reset(self) -> "ProfileBuilder":
        """Clear all accumulated fields."""
        self._clear()
        return self

    def missing_fields(self) -> tuple[str, ...]:
        values = {"name": self._name, "age": self._age, "role": self._role}
        return tuple(f for f in REQUIRED_FIELDS if values[f] is None)

    def build(self) -> Profile:
        """Return a new Profile. Raises IncompleteProfileError naming missing fields."""
        missing = self.missing_fields()
        if missing:
            raise IncompleteProfileError(missing)

        profile = Profile(
            name=self._name,
            age=self._age,
            role=self._role,
            permissions=self._role_permissions | frozenset(self._extra_permissions),
        )
        logger.debug("Built profile name=%r role=%r", profile.name, profile.role)
        return profile
