"""A bounded-arity, bounded-depth tree addressed by paths from its root."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vextra.node import Node
from vextra.subtree import on_subtree, path_between
from vextra.tree_path import TreePath

__all__ = ["Tree"]


@dataclass(frozen=True, slots=True)
class Tree:
    """A tree rooted at a level-0 node; every update returns a new tree."""

    root: Node

    @classmethod
    def new(cls, arity: int, depth: int, default: Any) -> Tree:
        """Return a tree holding only a childless root with value ``default``."""
        return cls(Node.empty(0, arity, depth, default))

    @property
    def arity(self) -> int:
        return self.root.arity

    @property
    def depth(self) -> int:
        return self.root.depth

    def _check_path(self, path: TreePath) -> None:
        if not path.is_valid():
            raise ValueError("path holds a step outside the tree's arity")
        if len(path) >= self.depth:
            raise ValueError(f"path of length {len(path)} is too long for depth {self.depth}")

    def is_valid(self) -> bool:
        """True when the root is on level 0 and the whole tree keeps its invariants."""
        return self.root.level == 0 and self.root.is_valid()

    def insert(self, path: TreePath, node: Node) -> Tree:
        """Place ``node`` at the end of ``path``; its level must equal the path's length."""
        self._check_path(path)
        if node.level != len(path):
            raise ValueError(
                f"node at level {node.level} cannot be placed at a path of length {len(path)}"
            )
        return Tree(self.root.recursive_insert(path, node))

    def remove(self, path: TreePath) -> Tree:
        """Remove the node at the end of ``path``; unchanged if the path is empty or broken."""
        self._check_path(path)
        return Tree(self.root.recursive_remove(path))

    def visit(self, path: TreePath) -> tuple[Node, ...]:
        """Nodes along ``path``, excluding the root, up to the first missing node."""
        self._check_path(path)
        return self.root.recursive_visit(path)

    def trace(self, path: TreePath) -> tuple[Any, ...]:
        """Values met while following ``path`` from the root."""
        self._check_path(path)
        return self.root.recursive_trace(path)

    def seek(self, path: TreePath) -> Node | None:
        """Return the node at the end of ``path``, or ``None`` if it is absent."""
        self._check_path(path)
        return self.root.recursive_seek(path)

    def on_tree(self, node: Node) -> bool:
        """True when ``node`` is the root or is reachable from it."""
        return on_subtree(self.root, node)

    def get_path(self, node: Node) -> TreePath:
        """Return the path from the root to ``node``; it must be on the tree."""
        return path_between(self.root, node)