"""Roles API resources."""

import falcon.asgi

from profilekit.application.dto.role_dto import RoleOutput
from profilekit.application.ports import RoleRegistry
from profilekit.application.use_cases.role.register_role import RegisterRoleUseCase


class RolesResource:
    """GET/POST /v1/roles - list and register roles."""

    def __init__(self, registry: RoleRegistry, register_role: RegisterRoleUseCase) -> None:
        self._registry = registry
        self._register = register_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List registered roles."""
        items = [RoleOutput.from_role(r).to_dict() for r in self._registry.list_roles()]
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Register a new role."""
        body = await req.get_media()
        if not isinstance(body, dict):
            raise falcon.HTTPBadRequest(description="Request body must be a JSON object")
        try:
            name = body["name"]
            permissions = body["permissions"]
        except KeyError as e:
            raise falcon.HTTPBadRequest(description=f"Missing required field: {e}") from None
        if not isinstance(permissions, list):
            raise falcon.HTTPBadRequest(description="permissions must be a list")

        role = self._register.execute(name, permissions, body.get("description", ""))
        resp.media = RoleOutput.from_role(role).to_dict()
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET /v1/roles/{role_name} - single role."""

    def __init__(self, registry: RoleRegistry) -> None:
        self._registry = registry

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_name: str,
    ) -> None:
        role = self._registry.get(role_name)
        resp.media = RoleOutput.from_role(role).to_dict()
        resp.status = falcon.HTTP_200
