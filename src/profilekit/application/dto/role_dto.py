"""Role DTOs."""

from dataclasses import dataclass

from profilekit.domain.entities import Role


@dataclass
class RoleOutput:
    """Output DTO for role."""

    name: str
    permissions: list[str]
    description: str

    @classmethod
    def from_role(cls, role: Role) -> "RoleOutput":
        return cls(
            name=role.name,
            permissions=sorted(p.value for p in role.permissions),
            description=role.description,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "permissions": self.permissions,
            "description": self.description,
        }
