"""Health check endpoints."""

import falcon.asgi

from profilekit.application.ports import RoleRegistry


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, registry: RoleRegistry) -> None:
        self._registry = registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (registry seeded)."""
        roles = len(self._registry.list_roles())
        resp.media = {"status": "ready", "roles": roles}
        resp.status = falcon.HTTP_200
