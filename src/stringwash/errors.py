"""Exceptions raised by stringwash."""


class StringwashError(Exception):
    """Base class for stringwash errors."""


class ConfigError(StringwashError, ValueError):
    """Raised when a configuration file has invalid content."""


class ProfileNotFoundError(StringwashError, KeyError):
    """Raised when a wash profile name is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown wash profile: {self.name}"
