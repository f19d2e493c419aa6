"""Register role use case."""

from profilekit.application.ports import RoleRegistry
from profilekit.domain.entities import Role
from profilekit.domain.value_objects import parse_permissions


class RegisterRoleUseCase:
    """Register a new role from permission names."""

    def __init__(self, registry: RoleRegistry) -> None:
        self._registry = registry

    def execute(
        self,
        name: str,
        permissions: list[str],
        description: str = "",
    ) -> Role:
        """Parse permission names and register. Unknown names raise ValidationError."""
        return self._registry.register(name, parse_permissions(permissions), description)
