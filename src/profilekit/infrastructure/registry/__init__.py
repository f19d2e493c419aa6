"""Role registry adapters."""

from profilekit.infrastructure.registry.in_memory_role_registry import (
    DEFAULT_ROLES,
    InMemoryRoleRegistry,
)

__all__ = ["DEFAULT_ROLES", "InMemoryRoleRegistry"]
