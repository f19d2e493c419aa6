"""Profiles API resources."""

import falcon.asgi

from profilekit.application.dto.profile_dto import ProfileCreateInput, ProfileOutput
from profilekit.application.use_cases.profile.create_profile import CreateProfileUseCase


class ProfilesResource:
    """POST /v1/profiles - create a profile for a registered role."""

    def __init__(self, create_profile: CreateProfileUseCase) -> None:
        self._create = create_profile

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create profile. Name and age are generated when omitted."""
        body = await req.get_media()
        if not isinstance(body, dict):
            raise falcon.HTTPBadRequest(description="Request body must be a JSON object")
        try:
            role = body["role"]
        except KeyError as e:
            raise falcon.HTTPBadRequest(description=f"Missing required field: {e}") from None
        if not isinstance(role, str):
            raise falcon.HTTPBadRequest(description="role must be a string")
        extra = body.get("extra_permissions", [])
        if not isinstance(extra, list):
            raise falcon.HTTPBadRequest(description="extra_permissions must be a list")

        profile = self._create.execute(
            ProfileCreateInput(
                role=role,
                name=body.get("name"),
                age=body.get("age"),
                extra_permissions=extra,
            )
        )
        resp.media = ProfileOutput.from_profile(profile).to_dict()
        resp.status = falcon.HTTP_201
