"""Permission-style access to a fixed-length array whose slots may be uninitialised."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from vextra.mem_contents import MemContents, SlotStateError, all_init, all_uninit

__all__ = ["PointsToArray"]


class PointsToArray:
    """Track the contents of every slot of a fixed-length array.

    Each operation checks the slot states it needs and raises
    :class:`SlotStateError` when they do not hold, or :class:`IndexError`
    when an index lies outside the array.
    """

    __slots__ = ("_slots",)

    def __init__(self, contents: Iterable[MemContents]) -> None:
        self._slots = list(contents)

    @classmethod
    def uninit(cls, length: int) -> PointsToArray:
        """Return an array of ``length`` uninitialised slots."""
        if length < 0:
            raise ValueError("length must be non-negative")
        return cls(MemContents.uninit() for _ in range(length))

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def opt_value(self) -> tuple[MemContents, ...]:
        """The contents of every slot, in order."""
        return tuple(self._slots)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"index {index} out of range for length {len(self._slots)}")

    def is_init(self, index: int) -> bool:
        """True when ``index`` is in range and its slot is initialised."""
        return 0 <= index < len(self._slots) and self._slots[index].is_init()

    def is_uninit(self, index: int) -> bool:
        """True when ``index`` is in range and its slot is uninitialised."""
        return 0 <= index < len(self._slots) and self._slots[index].is_uninit()

    def is_init_all(self) -> bool:
        return all_init(self._slots)

    def is_uninit_all(self) -> bool:
        return all_uninit(self._slots)

    def value(self) -> tuple[Any, ...]:
        """Return all values; every slot must be initialised."""
        if not self.is_init_all():
            raise SlotStateError("array is not fully initialized")
        return tuple(slot.value() for slot in self._slots)

    def leak_contents(self, index: int) -> None:
        """Forget the contents of slot ``index``, leaving it uninitialised."""
        self._check_index(index)
        self._slots[index] = MemContents.uninit()

    def fill(self, value: Any) -> None:
        """Initialise every slot with ``value``; all slots must be uninitialised."""
        if not self.is_uninit_all():
            raise SlotStateError("array is not fully uninitialized")
        self._slots = [MemContents.init(value) for _ in self._slots]

    def write_at(self, index: int, value: Any) -> None:
        """Initialise slot ``index`` with ``value``; the slot must be uninitialised."""
        self._check_index(index)
        if self._slots[index].is_init():
            raise SlotStateError(f"slot {index} is already initialized")
        self._slots[index] = MemContents.init(value)

    def read_at(self, index: int) -> Any:
        """Move the value out of slot ``index``, leaving it uninitialised."""
        self._check_index(index)
        value = self._slots[index].value()
        self._slots[index] = MemContents.uninit()
        return value

    def read_all(self) -> tuple[Any, ...]:
        """Move every value out of the array, leaving all slots uninitialised."""
        values = self.value()
        self._slots = [MemContents.uninit() for _ in self._slots]
        return values

    def ref_at(self, index: int) -> Any:
        """Return the value in slot ``index`` without moving it."""
        self._check_index(index)
        return self._slots[index].value()

    def ref(self) -> tuple[Any, ...]:
        """Return every value without moving them; all slots must be initialised."""
        return self.value()

    def __repr__(self) -> str:
        return f"PointsToArray({self._slots!r})"