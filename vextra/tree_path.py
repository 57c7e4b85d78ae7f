"""Paths through a tree whose nodes have a bounded number of children."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = ["TreePath"]


@dataclass(frozen=True, slots=True)
class TreePath:
    """A sequence of child indices leading down from a node.

    ``arity`` is the largest number of children a node may have. A path is
    valid when every index lies in ``range(arity)``.
    """

    arity: int
    steps: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.arity < 1:
            raise ValueError("arity must be positive")
        object.__setattr__(self, "steps", tuple(self.steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> int:
        return self.steps[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.steps)

    def _check_step(self, step: int) -> None:
        if not 0 <= step < self.arity:
            raise ValueError(f"step {step} out of range for arity {self.arity}")

    def _with(self, steps: Iterable[int]) -> TreePath:
        return TreePath(self.arity, tuple(steps))

    def is_valid(self) -> bool:
        """True when every step is a valid child index."""
        return all(0 <= step < self.arity for step in self.steps)

    def is_empty(self) -> bool:
        return not self.steps

    def pop_head(self) -> tuple[int, TreePath]:
        """Split off the first step; the path must not be empty."""
        if not self.steps:
            raise IndexError("pop_head from an empty path")
        return self.steps[0], self._with(self.steps[1:])

    def pop_tail(self) -> tuple[int, TreePath]:
        """Split off the last step; the path must not be empty."""
        if not self.steps:
            raise IndexError("pop_tail from an empty path")
        return self.steps[-1], self._with(self.steps[:-1])

    def push_head(self, head: int) -> TreePath:
        """Return a path with ``head`` prepended."""
        self._check_step(head)
        return self._with((head, *self.steps))

    def push_tail(self, value: int) -> TreePath:
        """Return a path with ``value`` appended."""
        self._check_step(value)
        return self._with((*self.steps, value))