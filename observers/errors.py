"""Errors raised by the observer registry on contract violations."""


class ObserverRegistryError(Exception):
    """Base class for registry contract violations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(ObserverRegistryError, ValueError):
    """Raised when a None observer handle is supplied."""


class InvalidStateError(ObserverRegistryError, RuntimeError):
    """Raised on a duplicate register or an unregister of an absent handle."""
