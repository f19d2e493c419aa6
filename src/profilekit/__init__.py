"""profilekit - validated user profiles with role-derived permissions."""

__version__ = "0.1.0"
