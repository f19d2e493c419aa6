"""Role registry port."""

from collections.abc import Iterable
from typing import Protocol

from profilekit.domain.entities import Role
from profilekit.domain.value_objects import Permission


class RoleRegistry(Protocol):
    """Port for the role -> permissions source of truth. Append-only."""

    def permissions_for(self, role_name: str) -> frozenset[Permission]: ...

    def get(self, role_name: str) -> Role: ...

    def register(
        self,
        role_name: str,
        permissions: Iterable[Permission],
        description: str = "",
    ) -> Role: ...

    def list_roles(self) -> list[Role]: ...
