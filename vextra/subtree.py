"""Find whether one tree node lies under another, and the path that leads there."""

from __future__ import annotations

from vextra.node import Node
from vextra.tree_path import TreePath

__all__ = ["on_subtree", "path_between"]


def _find_steps(src: Node, dst: Node) -> tuple[int, ...] | None:
    if src == dst:
        return ()
    if src.level >= dst.level:
        return None
    for key, child in enumerate(src.children):
        if child is None:
            continue
        rest = _find_steps(child, dst)
        if rest is not None:
            return (key, *rest)
    return None


def on_subtree(root: Node, node: Node) -> bool:
    """True when ``node`` is ``root`` itself or is reachable from ``root`` by a path."""
    return _find_steps(root, node) is not None


def path_between(src: Node, dst: Node) -> TreePath:
    """Return the path leading from ``src`` down to ``dst``.

    The path is empty when the two nodes are equal. Raises :class:`ValueError`
    when ``dst`` is not on the subtree rooted at ``src``.
    """
    steps = _find_steps(src, dst)
    if steps is None:
        raise ValueError("destination node is not on the subtree of the source node")
    return TreePath(src.arity, steps)