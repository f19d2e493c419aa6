"""Pytest fixtures for profilekit tests."""

from __future__ import annotations

import random

import pytest

from profilekit.application.factories import ProfileFactory
from profilekit.domain.profile_builder import ProfileBuilder
from profilekit.infrastructure.registry import InMemoryRoleRegistry


# --- Fake generators ---


class FixedNameGenerator:
    """Returns names from a fixed list, cycling."""

    def __init__(self, names: list[str] | None = None) -> None:
        self._names = names or ["Test User"]
        self.calls = 0

    def __call__(self) -> str:
        name = self._names[self.calls % len(self._names)]
        self.calls += 1
        return name


class FixedAgeGenerator:
    """Returns a fixed age and records the requested ranges."""

    def __init__(self, age: int = 42) -> None:
        self._age = age
        self.ranges: list[tuple[int, int]] = []

    def __call__(self, min_age: int, max_age: int) -> int:
        self.ranges.append((min_age, max_age))
        return self._age


# --- Fixtures ---


@pytest.fixture
def registry() -> InMemoryRoleRegistry:
    """Fresh registry seeded with default roles for each test."""
    return InMemoryRoleRegistry()


@pytest.fixture
def empty_registry() -> InMemoryRoleRegistry:
    """Registry with no roles."""
    return InMemoryRoleRegistry(seed_defaults=False)


@pytest.fixture
def builder() -> ProfileBuilder:
    return ProfileBuilder()


@pytest.fixture
def name_generator() -> FixedNameGenerator:
    return FixedNameGenerator(["Alice Smith", "Bob Jones"])


@pytest.fixture
def age_generator() -> FixedAgeGenerator:
    return FixedAgeGenerator(42)


@pytest.fixture
def factory(registry, name_generator, age_generator) -> ProfileFactory:
    """Factory with deterministic generators."""
    return ProfileFactory(
        registry,
        name_generator=name_generator,
        age_generator=age_generator,
        min_age=20,
        max_age=60,
        rng=random.Random(0),
    )


@pytest.fixture
def bare_factory(registry) -> ProfileFactory:
    """Factory without generators - callers must supply name and age."""
    return ProfileFactory(registry)
