"""Unit tests for ProfileFactory."""

import random

import pytest

from profilekit.application.factories import ProfileFactory
from profilekit.domain.entities import Role
from profilekit.domain.exceptions import (
    IncompleteProfileError,
    ProfileKitError,
    UnknownRoleError,
    ValidationError,
)
from profilekit.domain.value_objects import Permission
from profilekit.infrastructure.registry import InMemoryRoleRegistry


class TestCreateForRole:
    """Tests for create_for_role()."""

    def test_admin_end_to_end(self, factory: ProfileFactory) -> None:
        profile = factory.create_for_role("admin")
        assert profile.role == "admin"
        assert profile.permissions == frozenset(
            {Permission.READ, Permission.WRITE, Permission.DELETE}
        )

    def test_unknown_role_propagates(self, factory: ProfileFactory) -> None:
        with pytest.raises(UnknownRoleError, match="ghost-role"):
            factory.create_for_role("ghost-role")

    def test_registered_role_used(self, registry: InMemoryRoleRegistry, factory: ProfileFactory) -> None:
        registry.register("moderator", [Permission.READ, Permission.WRITE])
        profile = factory.create_for_role("moderator")
        assert profile.role == "moderator"
        assert profile.permissions == frozenset({Permission.READ, Permission.WRITE})

    def test_permissions_match_registry(self, registry: InMemoryRoleRegistry, factory: ProfileFactory) -> None:
        for role in registry.list_roles():
            assert factory.create_for_role(role.name).permissions == registry.permissions_for(role.name)

    def test_explicit_fields_used(self, factory: ProfileFactory, name_generator, age_generator) -> None:
        profile = factory.create_for_role("viewer", name="Carol", age=25)
        assert profile.name == "Carol"
        assert profile.age == 25
        assert name_generator.calls == 0
        assert age_generator.ranges == []

    def test_generated_fields_used(self, factory: ProfileFactory, age_generator) -> None:
        profile = factory.create_for_role("viewer")
        assert profile.name == "Alice Smith"
        assert profile.age == 42
        assert age_generator.ranges == [(20, 60)]

    def test_pre_resolved_role(self, registry: InMemoryRoleRegistry, bare_factory: ProfileFactory) -> None:
        """A registered Role value is accepted."""
        role = registry.register("auditor", {Permission.READ})
        profile = bare_factory.create_for_role(role, name="Dana", age=33)
        assert profile.role == "auditor"
        assert profile.permissions == frozenset({Permission.READ})

    def test_role_value_with_forged_permissions_rejected(self, bare_factory: ProfileFactory) -> None:
        """A Role value whose permissions differ from the registry is rejected."""
        forged = Role(name="admin", permissions={Permission.READ})
        with pytest.raises(ValidationError, match="admin"):
            bare_factory.create_for_role(forged, name="Eve", age=33)

    def test_unregistered_role_value_rejected(self, bare_factory: ProfileFactory) -> None:
        """A Role value that was never registered raises UnknownRoleError."""
        ghost = Role(name="ghost-role", permissions={Permission.DELETE})
        with pytest.raises(UnknownRoleError, match="ghost-role"):
            bare_factory.create_for_role(ghost, name="Eve", age=33)

    def test_permissions_resolved_through_permissions_for(self, registry: InMemoryRoleRegistry) -> None:
        """The factory reads permissions via permissions_for."""
        calls: list[str] = []
        original = registry.permissions_for

        def spy(role_name: str) -> frozenset[Permission]:
            calls.append(role_name)
            return original(role_name)

        registry.permissions_for = spy
        ProfileFactory(registry).create_for_role("editor", name="Fay", age=28)
        assert calls == ["editor"]

    def test_extra_permissions(self, factory: ProfileFactory) -> None:
        profile = factory.create_for_role("viewer", extra_permissions=[Permission.WRITE, Permission.READ])
        assert profile.permissions == frozenset({Permission.READ, Permission.WRITE})

    def test_missing_values_without_generators(self, bare_factory: ProfileFactory) -> None:
        with pytest.raises(IncompleteProfileError) as exc_info:
            bare_factory.create_for_role("viewer")
        assert exc_info.value.missing_fields == ("name", "age")

    def test_builder_failure_propagates(self, factory: ProfileFactory) -> None:
        with pytest.raises(ValidationError):
            factory.create_for_role("viewer", age=0)

    def test_invalid_generated_value_propagates(self, registry: InMemoryRoleRegistry) -> None:
        factory = ProfileFactory(registry, name_generator=lambda: "", age_generator=lambda lo, hi: 30)
        with pytest.raises(ValidationError):
            factory.create_for_role("viewer")


class TestConvenience:
    """Tests for create_admin/editor/viewer."""

    def test_wrappers_go_through_registry(self, factory: ProfileFactory, registry: InMemoryRoleRegistry) -> None:
        assert factory.create_admin().permissions == registry.permissions_for("admin")
        assert factory.create_editor().permissions == registry.permissions_for("editor")
        assert factory.create_viewer().permissions == registry.permissions_for("viewer")

    def test_wrapper_roles(self, factory: ProfileFactory) -> None:
        assert factory.create_admin(name="A", age=50).role == "admin"
        assert factory.create_editor(name="E", age=40).role == "editor"
        assert factory.create_viewer(name="V", age=30).role == "viewer"

    def test_wrapper_fails_when_role_missing(self, empty_registry: InMemoryRoleRegistry) -> None:
        factory = ProfileFactory(empty_registry)
        with pytest.raises(UnknownRoleError):
            factory.create_admin(name="A", age=50)


class TestCreateRandom:
    """Tests for create_random()."""

    def test_random_role_is_registered(self, factory: ProfileFactory, registry: InMemoryRoleRegistry) -> None:
        for _ in range(10):
            profile = factory.create_random()
            assert profile.role in registry
            assert profile.permissions == registry.permissions_for(profile.role)

    def test_random_with_role(self, factory: ProfileFactory) -> None:
        assert factory.create_random("editor").role == "editor"

    def test_random_deterministic_with_seed(self, registry: InMemoryRoleRegistry) -> None:
        def make() -> ProfileFactory:
            return ProfileFactory(
                registry,
                name_generator=lambda: "Same Name",
                age_generator=lambda lo, hi: lo,
                rng=random.Random(7),
            )

        first, second = make(), make()
        assert [first.create_random().role for _ in range(5)] == [
            second.create_random().role for _ in range(5)
        ]

    def test_random_empty_registry(self, empty_registry: InMemoryRoleRegistry) -> None:
        factory = ProfileFactory(empty_registry)
        with pytest.raises(ProfileKitError, match="No roles"):
            factory.create_random()
