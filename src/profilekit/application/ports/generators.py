"""Field value generator ports used for synthetic profiles."""

from typing import Protocol


class NameGenerator(Protocol):
    """Supplies a plausible person name."""

    def __call__(self) -> str: ...


class AgeGenerator(Protocol):
    """Supplies a plausible age within [min_age, max_age]."""

    def __call__(self, min_age: int, max_age: int) -> int: ...
