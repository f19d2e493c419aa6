"""Application ports - interfaces for external adapters."""

from profilekit.application.ports.generators import AgeGenerator, NameGenerator
from profilekit.application.ports.role_registry import RoleRegistry

__all__ = [
    "AgeGenerator",
    "NameGenerator",
    "RoleRegistry",
]
