# vextra

This is a small library of checked data structures. It also has helpers that
find the tools of a verification toolchain and read the layout of a cargo
workspace.

## What is inside

- `vextra.mem_contents`: `MemContents` represents one memory slot. A slot is
  either initialised (`MemContents.init(value)`) or not
  (`MemContents.uninit()`). The module also has `all_init`, `all_uninit`,
  `unwrap_contents` and `wrap_contents`. Reading an empty slot, or merging
  slots that are only partly initialised, raises `SlotStateError`.
- `vextra.points_to`: `PointsToArray` tracks the contents of each slot in a
  fixed-length array. Its operations are `fill`, `write_at`, `read_at`,
  `read_all`, `ref_at`, `ref` and `leak_contents`. Each one checks the slot
  states it needs first.
- `vextra.array_ptr`: `ArrayPtr` is an allocated array with a non-zero
  address. It is created with `ArrayPtr.empty(length)` or
  `ArrayPtr.new(length, default)`. You move values in with `insert`,
  `make_as` and `overwrite`, and out with `take_at`, `take_all` and
  `into_inner`. You read them in place with `get`, `borrow_at` and `borrow`.
  `update` swaps a value and returns the old one. `free` only succeeds when
  every slot is empty, and a freed array cannot be used again.
- `vextra.tree_path`: `TreePath(arity, steps)` is an immutable path of child
  indices. It supports `push_head`, `push_tail`, `pop_head`, `pop_tail` and
  `is_valid`.
- `vextra.node`: `Node` is an immutable tree node with `arity` child slots, a
  `level` and a maximum `depth`. It has `insert`, `remove`, `child`,
  `set_value`, `is_leaf` and `is_valid`. It also has path-based versions:
  `recursive_insert`, `recursive_remove`, `recursive_visit`,
  `recursive_trace` and `recursive_seek`.
- `vextra.subtree`: `on_subtree(root, node)` and `path_between(src, dst)`.
- `vextra.tree`: `Tree` is a tree rooted at a level-0 node. It has `insert`,
  `remove`, `visit`, `trace`, `seek`, `on_tree` and `get_path`. Every update
  returns a new tree.
- `vextra.toolchain`: `locate` looks up a binary in three places, in this
  order: an environment variable, then hint directories, then `PATH`.
  `find_verus` uses `VERUS_PATH`, then `tools/verus/source/target-verus/release`,
  then `PATH`. `find_z3` uses `VERUS_Z3_PATH`, then `tools/verus/source`, then
  `PATH`. `find_rustfilt` runs `cargo install` when the tool is missing.
  `find_objdump` does the same, but first honours `LLVM_OBJDUMP`. A tool that
  cannot be found raises `ToolNotFoundError`.
- `vextra.workspace`: `all_targets` lists the workspace members via
  `cargo metadata`. `validate_target` checks a target name against them.
  `crate_type`, `binary_prefix` and `binary_suffix` describe a crate's build
  output. `verus_data` and `verus_library` return the paths of built
  artifacts. `get_dependencies` reads the local path dependencies from a
  crate's `Cargo.toml`. Problems raise `WorkspaceError`.

## Example

```python
from vextra.array_ptr import ArrayPtr
from vextra.node import Node
from vextra.tree import Tree
from vextra.tree_path import TreePath

arr = ArrayPtr.new(4, 0)
previous = arr.update(2, 7)       # returns 0
assert arr.get(2) == 7

tree = Tree.new(arity=2, depth=3, default=0)
path = TreePath(2, (1,))
node = Node.empty(1, 2, 3, 5)
tree = tree.insert(path, node)
assert tree.seek(path).value == 5
assert tree.get_path(node) == path
```

## What it does not do

The package has no command-line program. It finds the tools and reads the
workspace, but it does not itself do any of the following:

- run verification, compilation, documentation, bootstrap or formatting
  steps;
- translate bit flags between flag sets.

## Tests

```
pip install -e .[test]
pytest
```