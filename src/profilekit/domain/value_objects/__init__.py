"""Domain value objects."""

from profilekit.domain.value_objects.permission import Permission, parse_permissions

__all__ = [
    "Permission",
    "parse_permissions",
]
