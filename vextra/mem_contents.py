"""Per-slot memory contents: each slot is either initialised with a value or not."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "SlotStateError",
    "MemContents",
    "all_init",
    "all_uninit",
    "unwrap_contents",
    "wrap_contents",
]


class SlotStateError(ValueError):
    """Raised when a slot or array is not in the state an operation needs."""


class MemContents:
    """The contents of one memory slot: initialised with a value, or uninitialised."""

    __slots__ = ("_initialized", "_value")

    def __init__(self, initialized: bool, value: Any = None) -> None:
        self._initialized = initialized
        self._value = value if initialized else None

    @classmethod
    def init(cls, value: Any) -> MemContents:
        """Return initialised contents holding ``value``."""
        return cls(True, value)

    @classmethod
    def uninit(cls) -> MemContents:
        """Return uninitialised contents."""
        return cls(False)

    def is_init(self) -> bool:
        return self._initialized

    def is_uninit(self) -> bool:
        return not self._initialized

    def value(self) -> Any:
        """Return the held value; raise :class:`SlotStateError` if uninitialised."""
        if not self._initialized:
            raise SlotStateError("slot is not initialized")
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemContents):
            return NotImplemented
        return self._initialized == other._initialized and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._initialized, self._value))

    def __repr__(self) -> str:
        if self._initialized:
            return f"MemContents.init({self._value!r})"
        return "MemContents.uninit()"


def all_init(contents: Iterable[MemContents]) -> bool:
    """True when every slot is initialised."""
    return all(slot.is_init() for slot in contents)


def all_uninit(contents: Iterable[MemContents]) -> bool:
    """True when every slot is uninitialised."""
    return all(slot.is_uninit() for slot in contents)


def unwrap_contents(contents: Sequence[MemContents]) -> MemContents:
    """Merge per-slot contents into contents of the whole array.

    All-initialised slots become initialised contents holding a tuple of the values;
    all-uninitialised slots become uninitialised contents. A mix is an error.
    """
    if all_init(contents):
        return MemContents.init(tuple(slot.value() for slot in contents))
    if all_uninit(contents):
        return MemContents.uninit()
    raise SlotStateError("array is partially initialized")


def wrap_contents(data: MemContents, length: int) -> list[MemContents]:
    """Split contents of a whole array of ``length`` items into per-slot contents."""
    if length < 0:
        raise ValueError("length must be non-negative")
    if data.is_uninit():
        return [MemContents.uninit() for _ in range(length)]
    values = tuple(data.value())
    if len(values) != length:
        raise ValueError(f"expected {length} values, got {len(values)}")
    return [MemContents.init(v) for v in values]