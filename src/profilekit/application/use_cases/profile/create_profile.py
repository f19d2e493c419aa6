"""Create profile use case."""

from profilekit.application.dto.profile_dto import ProfileCreateInput
from profilekit.application.factories import ProfileFactory
from profilekit.domain.entities import Profile
from profilekit.domain.value_objects import parse_permissions


class CreateProfileUseCase:
    """Create a profile for a registered role."""

    def __init__(self, profile_factory: ProfileFactory) -> None:
        self._factory = profile_factory

    def execute(self, data: ProfileCreateInput) -> Profile:
        extras = parse_permissions(data.extra_permissions)
        return self._factory.create_for_role(
            data.role,
            name=data.name,
            age=data.age,
            extra_permissions=sorted(extras),
        )
