"""Thread-safe registry of observer handles (in-memory, insertion ordered)."""

import threading
from typing import TYPE_CHECKING, Any, Generic, List, Optional, TypeVar

from observers.errors import InvalidArgumentError, InvalidStateError
from observers.observability import Metrics, get_logger

if TYPE_CHECKING:
    from observers.config import RegistrySettings

T = TypeVar("T")


class ObserverRegistry(Generic[T]):
    """
    Deduplicated, insertion-ordered list of observer handles guarded by one lock.

    Handles are compared with ``==``, so value-equal handles collide. Wrap
    identity-only handles (closures, bound methods) in ``IdentityRef``.
    Membership checks scan the list, O(n) per call.

    The registry never notifies anyone: owners iterate ``snapshot()``.
    """

    def __init__(self, name: str = "default", metrics: Optional[Metrics] = None) -> None:
        self._name = name
        self._observers: List[T] = []
        self._lock = threading.Lock()
        self._metrics = metrics
        self._logger = get_logger(f"observers.registry.{name}")

    @classmethod
    def from_settings(
        cls,
        name: str = "default",
        settings: Optional["RegistrySettings"] = None,
    ) -> "ObserverRegistry[T]":
        """Build a registry configured from the environment (or the given settings)."""
        from observers.config import load_settings

        if settings is None:
            settings = load_settings()
        registry: "ObserverRegistry[T]" = cls(
            name, metrics=Metrics() if settings.metrics_enabled else None
        )
        registry._logger.setLevel(settings.log_level)
        return registry

    @property
    def name(self) -> str:
        return self._name

    @property
    def metrics(self) -> Optional[Metrics]:
        return self._metrics

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._observers

    def register(self, observer: T) -> None:
        """Append an observer. It must not be None and must not already be registered."""
        self._require_handle(observer, "register")
        with self._lock:
            duplicate = observer in self._observers
            if not duplicate:
                self._observers.append(observer)
                count = len(self._observers)
                self._record("registered", count)
        # repr() and logging stay outside the lock; observers may call back in
        if duplicate:
            self._reject("register", observer)
            raise InvalidStateError(f"Observer {observer!r} is already registered.")
        self._logger.info(
            "observer_registered",
            extra={"registry": self._name, "observer": repr(observer), "count": count},
        )

    def unregister(self, observer: T) -> None:
        """Remove a previously registered observer; the rest keep their order."""
        self._require_handle(observer, "unregister")
        with self._lock:
            try:
                index = self._observers.index(observer)
            except ValueError:
                index = -1
            if index != -1:
                del self._observers[index]
                count = len(self._observers)
                self._record("unregistered", count)
        if index == -1:
            self._reject("unregister", observer)
            raise InvalidStateError(f"Observer {observer!r} was not registered.")
        self._logger.info(
            "observer_unregistered",
            extra={"registry": self._name, "observer": repr(observer), "count": count},
        )

    def clear(self) -> None:
        """Remove all registered observers."""
        with self._lock:
            removed = len(self._observers)
            self._observers.clear()
            self._record("cleared", 0)
        self._logger.info(
            "observers_cleared",
            extra={"registry": self._name, "removed": removed},
        )

    def snapshot(self) -> List[T]:
        """Return a copy of the observer list (under lock)."""
        with self._lock:
            return list(self._observers)

    def _require_handle(self, observer: Any, operation: str) -> None:
        if observer is None:
            self._reject(operation, observer)
            raise InvalidArgumentError("The observer is None.")

    def _reject(self, operation: str, observer: Any) -> None:
        if self._metrics is not None:
            self._metrics.increment("rejected")
        self._logger.warning(
            f"{operation}_rejected",
            extra={"registry": self._name, "observer": repr(observer)},
        )

    def _record(self, counter: str, count: int) -> None:
        # caller holds self._lock
        if self._metrics is None:
            return
        self._metrics.increment(counter)
        self._metrics.set_gauge("observers", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        if observer is None:
            return False
        with self._lock:
            return observer in self._observers

    def __repr__(self) -> str:
        return f"ObserverRegistry(name={self._name!r}, observers={len(self)})"
