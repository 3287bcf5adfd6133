"""Thread-safe observer registry with observability hooks (in-memory, no dispatch)."""

from observers.config import RegistrySettings, load_settings
from observers.errors import InvalidArgumentError, InvalidStateError, ObserverRegistryError
from observers.identity import IdentityRef
from observers.observability import Metrics
from observers.registry import ObserverRegistry

__all__ = [
    "ObserverRegistry",
    "IdentityRef",
    "Metrics",
    "RegistrySettings",
    "load_settings",
    "ObserverRegistryError",
    "InvalidArgumentError",
    "InvalidStateError",
]
