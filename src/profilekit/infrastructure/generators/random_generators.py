"""Seedable random name and age generators."""

import random

FIRST_NAMES = (
    "Alice", "Bob", "Carmen", "Dmitri", "Elena", "Farid", "Grace", "Hiro",
    "Ines", "Jonas", "Keiko", "Liam", "Maya", "Nikolai", "Olivia", "Pedro",
    "Quinn", "Rosa", "Samir", "Tara", "Umar", "Vera", "Wei", "Yara", "Zoe",
)

LAST_NAMES = (
    "Anderson", "Becker", "Castillo", "Dubois", "Eriksen", "Fischer", "Garcia",
    "Hoffmann", "Ivanova", "Jensen", "Kowalski", "Lindqvist", "Moreau",
    "Nakamura", "Okafor", "Petrov", "Rossi", "Schmidt", "Tanaka", "Weber",
)


class RandomNameGenerator:
    """Combines a random first and last name."""

    def __init__(
        self,
        seed: int | None = None,
        first_names: tuple[str, ...] = FIRST_NAMES,
        last_names: tuple[str, ...] = LAST_NAMES,
    ) -> None:
        if not first_names or not last_names:
            raise ValueError("Name pools must not be empty")
        self._rng = random.Random(seed)
        self._first_names = first_names
        self._last_names = last_names

    def __call__(self) -> str:
        return f"{self._rng.choice(self._first_names)} {self._rng.choice(self._last_names)}"


class RandomAgeGenerator:
    """Uniform integer age in [min_age, max_age]."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def __call__(self, min_age: int, max_age: int) -> int:
        if min_age < 1:
            raise ValueError("min_age must be positive")
        if min_age > max_age:
            raise ValueError("min_age must not exceed max_age")
        return self._rng.randint(min_age, max_age)
