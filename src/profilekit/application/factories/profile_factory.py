"""Profile factory - builds ready-made profiles for registered roles."""

import random
from collections.abc import Iterable

from profilekit.application.ports import AgeGenerator, NameGenerator, RoleRegistry
from profilekit.domain.entities import Profile, Role
from profilekit.domain.exceptions import ProfileKitError, ValidationError
from profilekit.domain.profile_builder import ProfileBuilder
from profilekit.domain.value_objects import Permission
from profilekit.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 90


class ProfileFactory:
    """Creates profiles by resolving role permissions and feeding a fresh builder.

    Name and age not supplied by the caller come from the injected
    generators. Without a generator, a missing value surfaces as the
    builder's IncompleteProfileError. Failures are never retried.
    """

    def __init__(
        self,
        registry: RoleRegistry,
        name_generator: NameGenerator | None = None,
        age_generator: AgeGenerator | None = None,
        min_age: int = DEFAULT_MIN_AGE,
        max_age: int = DEFAULT_MAX_AGE,
        rng: random.Random | None = None,
    ) -> None:
        self._registry = registry
        self._name_generator = name_generator
        self._age_generator = age_generator
        self._min_age = min_age
        self._max_age = max_age
        self._rng = rng or random.Random()

    def create_for_role(
        self,
        role: str | Role,
        *,
        name: str | None = None,
        age: int | None = None,
        extra_permissions: Iterable[Permission] = (),
    ) -> Profile:
        """Create a profile for a role name or a Role value.

        Permissions always come from ``registry.permissions_for``. A Role value
        must match its registered definition; an unregistered name raises
        UnknownRoleError and a differing permission set raises ValidationError.
        """
        role_name = role.name if isinstance(role, Role) else role
        permissions = self._registry.permissions_for(role_name)
        if isinstance(role, Role) and role.permissions != permissions:
            raise ValidationError(
                f"Role {role_name!r} does not match its registered permissions"
            )

        if name is None and self._name_generator is not None:
            name = self._name_generator()
        if age is None and self._age_generator is not None:
            age = self._age_generator(self._min_age, self._max_age)

        builder = ProfileBuilder().with_role(role_name, permissions)
        if name is not None:
            builder.with_name(name)
        if age is not None:
            builder.with_age(age)
        for permission in extra_permissions:
            builder.add_extra_permission(permission)

        profile = builder.build()
        logger.debug("Created profile for role %r", role_name)
        return profile

    def create_admin(self, *, name: str | None = None, age: int | None = None) -> Profile:
        return self.create_for_role("admin", name=name, age=age)

    def create_editor(self, *, name: str | None = None, age: int | None = None) -> Profile:
        return self.create_for_role("editor", name=name, age=age)

    def create_viewer(self, *, name: str | None = None, age: int | None = None) -> Profile:
        return self.create_for_role("viewer", name=name, age=age)

    def create_random(self, role: str | Role | None = None) -> Profile:
        """Create a fully generated profile; picks a registered role when none is given."""
        if role is None:
            roles = self._registry.list_roles()
            if not roles:
                raise ProfileKitError("No roles registered to choose from")
            role = self._rng.choice(roles)
        return self.create_for_role(role)
