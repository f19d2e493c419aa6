"""Field checks shared by entities and the profile builder."""

from collections.abc import Iterable

from profilekit.domain.exceptions import ValidationError
from profilekit.domain.value_objects import Permission


def check_name(value: object, field: str = "name") -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty string")
    return value


def check_age(value: object) -> int:
    # bool is an int subclass; True is not an age
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("age must be an integer")
    if value < 1:
        raise ValidationError("age must be positive")
    return value


def check_permissions(values: Iterable[Permission] | None) -> frozenset[Permission]:
    """Snapshot permissions as a frozenset, rejecting anything that is not a Permission."""
    if values is None:
        raise ValidationError("permissions must be a collection, use an empty one for none")
    if isinstance(values, str):
        raise ValidationError("permissions must be a collection, not a single string")
    snapshot = frozenset(values)
    for value in snapshot:
        if not isinstance(value, Permission):
            raise ValidationError(f"Not a recognized permission: {value!r}")
    return snapshot
