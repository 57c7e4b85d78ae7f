"""A handle to an allocated fixed-length array together with the permission to use it."""

from __future__ import annotations

import itertools
from typing import Any

from vextra.mem_contents import MemContents, SlotStateError
from vextra.points_to import PointsToArray

__all__ = ["ArrayPtr"]

_ADDRESSES = itertools.count(0x1000, 0x1000)


class ArrayPtr:
    """An allocated array of ``length`` slots, addressed by a non-zero integer.

    Slots start uninitialised. Values are moved in and out with the methods
    below, each of which checks the slot states it needs. Once freed, the
    array can no longer be used.
    """

    __slots__ = ("_addr", "_perm")

    def __init__(self, addr: int, perm: PointsToArray) -> None:
        self._addr = addr
        self._perm: PointsToArray | None = perm

    @classmethod
    def empty(cls, length: int) -> ArrayPtr:
        """Allocate an array of ``length`` uninitialised slots."""
        if length <= 0:
            raise ValueError("an array must have a positive length")
        return cls(next(_ADDRESSES), PointsToArray.uninit(length))

    @classmethod
    def new(cls, length: int, default: Any) -> ArrayPtr:
        """Allocate an array of ``length`` slots all holding ``default``."""
        ptr = cls.empty(length)
        ptr.make_as(default)
        return ptr

    @property
    def addr(self) -> int:
        return self._addr

    @property
    def is_freed(self) -> bool:
        return self._perm is None

    @property
    def _live(self) -> PointsToArray:
        if self._perm is None:
            raise SlotStateError("array has been freed")
        return self._perm

    def __len__(self) -> int:
        return len(self._live)

    @property
    def opt_value(self) -> tuple[MemContents, ...]:
        return self._live.opt_value

    def is_init(self, index: int) -> bool:
        return self._live.is_init(index)

    def is_uninit(self, index: int) -> bool:
        return not self._live.is_init(index)

    def is_init_all(self) -> bool:
        return self._live.is_init_all()

    def is_uninit_all(self) -> bool:
        return self._live.is_uninit_all()

    def make_as(self, value: Any) -> None:
        """Initialise every slot with ``value``; all slots must be uninitialised."""
        self._live.fill(value)

    def insert(self, index: int, value: Any) -> None:
        """Move ``value`` into the uninitialised slot ``index``."""
        self._live.write_at(index, value)

    def take_at(self, index: int) -> Any:
        """Move the value out of slot ``index``, which becomes uninitialised."""
        return self._live.read_at(index)

    def take_all(self) -> tuple[Any, ...]:
        """Move every value out; all slots become uninitialised."""
        return self._live.read_all()

    def into_inner(self) -> tuple[Any, ...]:
        """Take every value and free the array."""
        values = self.take_all()
        self.free()
        return values

    def update(self, index: int, value: Any) -> Any:
        """Replace the value in initialised slot ``index`` and return the old one."""
        perm = self._live
        old = perm.read_at(index)
        perm.write_at(index, value)
        return old

    def borrow_at(self, index: int) -> Any:
        """Return the value in initialised slot ``index`` without moving it."""
        return self._live.ref_at(index)

    def borrow(self) -> tuple[Any, ...]:
        """Return every value without moving them; all slots must be initialised."""
        return self._live.ref()

    def overwrite(self, index: int, value: Any) -> None:
        """Store ``value`` in slot ``index``, leaking any value it held."""
        perm = self._live
        perm.leak_contents(index)
        perm.write_at(index, value)

    def leak_contents(self, index: int) -> None:
        """Forget the value in slot ``index``."""
        self._live.leak_contents(index)

    def get(self, index: int) -> Any:
        """Return a copy of the value in initialised slot ``index``."""
        return self.borrow_at(index)

    def free(self) -> None:
        """Release the array; every slot must be uninitialised."""
        if not self._live.is_uninit_all():
            raise SlotStateError("cannot free an array holding values")
        self._perm = None

    def __repr__(self) -> str:
        if self._perm is None:
            return f"ArrayPtr(addr={self._addr:#x}, freed)"
        return f"ArrayPtr(addr={self._addr:#x}, {self._perm.opt_value!r})"