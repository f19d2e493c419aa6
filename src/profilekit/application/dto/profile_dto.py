"""Profile DTOs."""

from dataclasses import dataclass, field

from profilekit.domain.entities import Profile


@dataclass
class ProfileCreateInput:
    """Input for creating a profile. Missing name/age are generated."""

    role: str
    name: str | None = None
    age: int | None = None
    extra_permissions: list[str] = field(default_factory=list)


@dataclass
class ProfileOutput:
    """Output DTO for profile."""

    name: str
    age: int
    role: str
    permissions: list[str]

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileOutput":
        return cls(
            name=profile.name,
            age=profile.age,
            role=profile.role,
            permissions=sorted(p.value for p in profile.permissions),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "age": self.age,
            "role": self.role,
            "permissions": self.permissions,
        }
