"""In-memory role registry, seeded with the default roles."""

import threading
from collections.abc import Iterable

from profilekit.domain.entities import Role
from profilekit.domain.exceptions import DuplicateRoleError, UnknownRoleError
from profilekit.domain.value_objects import Permission
from profilekit.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ROLES: tuple[Role, ...] = (
    Role(
        name="admin",
        permissions=frozenset({Permission.READ, Permission.WRITE, Permission.DELETE}),
        description="Administrator",
    ),
    Role(
        name="editor",
        permissions=frozenset({Permission.READ, Permission.WRITE}),
        description="Editor",
    ),
    Role(
        name="viewer",
        permissions=frozenset({Permission.READ}),
        description="Viewer",
    ),
)


class InMemoryRoleRegistry:
    """Thread-safe role registry. Roles can be added but never removed or redefined."""

    def __init__(self, seed_defaults: bool = True) -> None:
        self._lock = threading.Lock()
        self._roles: dict[str, Role] = {}
        if seed_defaults:
            for role in DEFAULT_ROLES:
                self._roles[role.name] = role

    def get(self, role_name: str) -> Role:
        if not isinstance(role_name, str):
            raise UnknownRoleError(role_name)
        with self._lock:
            role = self._roles.get(role_name)
        if role is None:
            raise UnknownRoleError(role_name)
        return role

    def permissions_for(self, role_name: str) -> frozenset[Permission]:
        """Return the permission set of a registered role."""
        return self.get(role_name).permissions

    def register(
        self,
        role_name: str,
        permissions: Iterable[Permission],
        description: str = "",
    ) -> Role:
        """Add a role. Raises DuplicateRoleError if the name is taken."""
        # Role() validates; a rejected role leaves the mapping untouched.
        role = Role(name=role_name, permissions=permissions, description=description)
        with self._lock:
            if role.name in self._roles:
                raise DuplicateRoleError(role.name)
            self._roles[role.name] = role
        logger.info(
            "Registered role %r with permissions %s",
            role.name,
            sorted(p.value for p in role.permissions),
        )
        return role

    def list_roles(self) -> list[Role]:
        with self._lock:
            roles = list(self._roles.values())
        return sorted(roles, key=lambda r: r.name)

    def __contains__(self, role_name: object) -> bool:
        with self._lock:
            return role_name in self._roles

    def __len__(self) -> int:
        with self._lock:
            return len(self._roles)
