"""Domain entities."""

from profilekit.domain.entities.profile import Profile
from profilekit.domain.entities.role import Role

__all__ = [
    "Profile",
    "Role",
]
