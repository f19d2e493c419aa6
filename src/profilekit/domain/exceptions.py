"""Domain exceptions."""


class ProfileKitError(Exception):
    """Base exception for profilekit."""

    pass


class UnknownRoleError(ProfileKitError):
    """Role name is not registered."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"Unknown role: {role_name!r}")


class DuplicateRoleError(ProfileKitError):
    """Role name is already registered."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"Role already registered: {role_name!r}")


class BuilderStateError(ProfileKitError):
    """Builder operation invoked before its prerequisite field was set."""

    pass


class IncompleteProfileError(ProfileKitError):
    """Build attempted before all required fields were set."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Profile is missing required fields: {', '.join(missing_fields)}")


class ValidationError(ProfileKitError):
    """Validation failed for input data."""

    pass
