"""Permissions a role can grant."""

from collections.abc import Iterable
from enum import StrEnum

from profilekit.domain.exceptions import ValidationError


class Permission(StrEnum):
    """Permissions recorded on a profile."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"


def parse_permissions(values: Iterable[str | Permission]) -> frozenset[Permission]:
    """Convert permission names to Permission members. Raises ValidationError on unknown names."""
    if isinstance(values, str):
        raise ValidationError("Permissions must be a collection, not a single string")
    parsed = set()
    for value in values:
        try:
            parsed.add(Permission(value))
        except ValueError:
            raise ValidationError(f"Unknown permission: {value!r}") from None
    return frozenset(parsed)
