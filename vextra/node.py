"""Nodes of a bounded-arity, bounded-depth tree, updated by returning new nodes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from vextra.tree_path import TreePath

__all__ = ["Node"]


@dataclass(frozen=True, slots=True)
class Node:
    """A tree node holding ``value`` at ``level``.

    A node has ``arity`` child slots, each empty (``None``) or holding a node
    one level deeper. Levels run from ``0`` to ``depth - 1``; nodes on the
    last level have no children. Every operation returns a new node and
    leaves the original untouched.
    """

    value: Any
    level: int
    arity: int
    depth: int
    children: tuple[Node | None, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.arity < 1:
            raise ValueError("arity must be positive")
        if self.depth < 1:
            raise ValueError("depth must be positive")
        children = tuple(self.children) if self.children else (None,) * self.arity
        object.__setattr__(self, "children", children)

    @classmethod
    def empty(cls, level: int, arity: int, depth: int, default: Any) -> Node:
        """Return a childless node at ``level`` holding ``default``."""
        return cls(default, level, arity, depth, (None,) * arity)

    def _check_key(self, key: int) -> None:
        if not 0 <= key < self.arity:
            raise IndexError(f"child index {key} out of range for arity {self.arity}")

    def _child_fits(self, child: Node) -> bool:
        return (
            child.level == self.level + 1
            and child.arity == self.arity
            and child.depth == self.depth
        )

    def is_valid(self) -> bool:
        """True when this node and everything below it keep the tree's invariants."""
        if not (0 <= self.level < self.depth and len(self.children) == self.arity):
            return False
        present = [c for c in self.children if c is not None]
        if self.level == self.depth - 1:
            return not present
        return all(self._child_fits(c) and c.is_valid() for c in present)

    def insert(self, key: int, node: Node) -> Node:
        """Return a copy with ``node`` placed in child slot ``key``."""
        self._check_key(key)
        if self.level >= self.depth - 1:
            raise ValueError("a node on the last level cannot have children")
        if not self._child_fits(node):
            raise ValueError(
                f"child must be at level {self.level + 1} of the same tree shape"
            )
        children = list(self.children)
        children[key] = node
        return replace(self, children=tuple(children))

    def remove(self, key: int) -> Node:
        """Return a copy with child slot ``key`` emptied."""
        self._check_key(key)
        children = list(self.children)
        children[key] = None
        return replace(self, children=tuple(children))

    def child(self, key: int) -> Node | None:
        """Return the child in slot ``key``, or ``None`` if the slot is empty."""
        self._check_key(key)
        return self.children[key]

    def set_value(self, value: Any) -> Node:
        """Return a copy holding ``value``."""
        return replace(self, value=value)

    def is_leaf(self) -> bool:
        """True when no child slot is occupied."""
        return all(c is None for c in self.children)

    def recursive_insert(self, path: TreePath, node: Node) -> Node:
        """Place ``node`` at the end of ``path``, creating missing nodes on the way."""
        if path.is_empty():
            return self
        if len(path) == 1:
            return self.insert(path[0], node)
        head, tail = path.pop_head()
        child = self.child(head)
        if child is None:
            child = Node.empty(self.level + 1, self.arity, self.depth, self.value_default())
        return self.insert(head, child.recursive_insert(tail, node))

    def value_default(self) -> Any:
        """The value given to nodes created to fill gaps: a fresh instance of this value's type."""
        try:
            return type(self.value)()
        except TypeError:
            return None

    def recursive_trace(self, path: TreePath) -> tuple[Any, ...]:
        """Values met while following ``path``.

        An empty path yields this node's value. Otherwise each present child
        contributes its value followed by the trace of the rest of the path
        from it; the walk stops at the first missing child.
        """
        if path.is_empty():
            return (self.value,)
        head, tail = path.pop_head()
        child = self.child(head)
        if child is None:
            return ()
        return (child.value, *child.recursive_trace(tail))

    def recursive_seek(self, path: TreePath) -> Node | None:
        """Return the node at the end of ``path``, or ``None`` if it is absent."""
        if path.is_empty():
            return self
        head, tail = path.pop_head()
        child = self.child(head)
        if child is None:
            return None
        return child.recursive_seek(tail)

    def recursive_visit(self, path: TreePath) -> tuple[Node, ...]:
        """Nodes along ``path``, excluding this one, up to the first missing node."""
        if path.is_empty():
            return ()
        head, tail = path.pop_head()
        child = self.child(head)
        if child is None:
            return ()
        if tail.is_empty():
            return (child,)
        return (child, *child.recursive_visit(tail))

    def recursive_remove(self, path: TreePath) -> Node:
        """Remove the node at the end of ``path``; unchanged if the path is empty or broken."""
        if path.is_empty():
            return self
        if len(path) == 1:
            return self.remove(path[0])
        head, tail = path.pop_head()
        child = self.child(head)
        if child is None:
            return self
        return self.insert(head, child.recursive_remove(tail))