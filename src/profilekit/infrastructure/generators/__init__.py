"""Field value generators for synthetic profiles."""

from profilekit.infrastructure.generators.random_generators import (
    RandomAgeGenerator,
    RandomNameGenerator,
)

__all__ = ["RandomAgeGenerator", "RandomNameGenerator"]
