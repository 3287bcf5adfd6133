"""Identity wrapper for observer handles whose equality is not meaningful."""

from typing import Any, Generic, TypeVar

from observers.errors import InvalidArgumentError

T = TypeVar("T")


class IdentityRef(Generic[T]):
    """Compares and hashes by the identity of the wrapped object; calls forward to it."""

    __slots__ = ("_target",)

    def __init__(self, target: T) -> None:
        if target is None:
            raise InvalidArgumentError("The observer is None.")
        self._target = target

    @property
    def target(self) -> T:
        return self._target

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._target(*args, **kwargs)  # type: ignore[operator]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityRef):
            return NotImplemented
        return self._target is other._target

    def __hash__(self) -> int:
        return id(self._target)

    def __repr__(self) -> str:
        return f"IdentityRef({self._target!r})"
