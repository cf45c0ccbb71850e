"""Errors raised while building response documents."""


class EmberRestError(Exception):
    """Base class for ember_rest errors."""


class UnknownModelError(EmberRestError, KeyError):
    """Raised when a model identity is not present in the registry."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"Unknown model: {identity}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ConfigurationError(EmberRestError, ValueError):
    """Raised when settings cannot be turned into working collaborators."""
