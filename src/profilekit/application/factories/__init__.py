"""Profile factories."""

from profilekit.application.factories.profile_factory import ProfileFactory

__all__ = ["ProfileFactory"]
