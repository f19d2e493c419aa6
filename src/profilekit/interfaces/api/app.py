"""Falcon ASGI application factory."""

import falcon.asgi

from profilekit.application.factories import ProfileFactory
from profilekit.application.ports import RoleRegistry
from profilekit.application.use_cases.profile.create_profile import CreateProfileUseCase
from profilekit.application.use_cases.role.register_role import RegisterRoleUseCase
from profilekit.domain.exceptions import ProfileKitError
from profilekit.interfaces.api.errors import handle_domain_error, handle_unexpected_error
from profilekit.interfaces.api.resources.health import HealthResource
from profilekit.interfaces.api.resources.profiles import ProfilesResource
from profilekit.interfaces.api.resources.roles import RoleResource, RolesResource


def create_app(registry: RoleRegistry, profile_factory: ProfileFactory) -> falcon.asgi.App:
    """Wire resources and error handlers around an existing registry and factory."""
    register_role = RegisterRoleUseCase(registry)
    create_profile = CreateProfileUseCase(profile_factory)

    health_resource = HealthResource(registry)

    app = falcon.asgi.App()
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(ProfileKitError, handle_domain_error)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", RolesResource(registry, register_role))
    app.add_route("/v1/roles/{role_name}", RoleResource(registry))
    app.add_route("/v1/profiles", ProfilesResource(create_profile))
    return app
