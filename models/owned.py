"""Single-owner handle used to hand a value from one scope to another."""

from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class HandleState(Enum):
    """Lifecycle of an Owned handle. Only LIVE handles may be used."""

    LIVE = "live"
    MOVED = "moved"  # Value handed to a successor handle
    RELEASED = "released"  # Value dropped, no successor


class MovedError(RuntimeError):
    """Raised when a handle is used after its value was moved or released."""


class Owned(Generic[T]):
    """
    Exclusive owner of a single value.

    Exactly one live handle owns the value at a time. ``move()`` hands the
    value to a fresh handle and leaves this one empty; ``release()`` ends
    ownership without a successor. Any access to an empty handle raises
    MovedError.
    """

    _EMPTY = object()

    def __init__(self, value: T):
        self._value = value
        self._state = HandleState.LIVE

    @property
    def state(self) -> HandleState:
        return self._state

    @property
    def is_live(self) -> bool:
        """True while this handle still owns its value."""
        return self._state == HandleState.LIVE

    def _check(self) -> None:
        if not self.is_live:
            raise MovedError(f"handle was {self._state.value}")

    def _vacate(self, state: HandleState) -> T:
        self._check()
        value = self._value
        self._value = self._EMPTY
        self._state = state
        return value

    def get(self) -> T:
        """Borrow the owned value."""
        self._check()
        return self._value

    def move(self) -> "Owned[T]":
        """Transfer ownership to a new handle. This handle becomes unusable."""
        return Owned(self._vacate(HandleState.MOVED))

    def release(self) -> None:
        """Drop the owned value."""
        self._vacate(HandleState.RELEASED)

    def __enter__(self) -> "Owned[T]":
        self._check()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Already moved out inside the block: nothing left to drop
        if self.is_live:
            self.release()

    def __repr__(self) -> str:
        if self.is_live:
            return f"Owned({self._value!r})"
        return f"Owned(<{self._state.value}>)"
