"""Discover the crates of the workspace and the artifacts built from them."""

from __future__ import annotations

import functools
import json
import os
import subprocess
import tomllib
from pathlib import Path

__all__ = [
    "WorkspaceError",
    "SYSTEM_CRATES",
    "WORKSPACE_CRATES",
    "all_targets",
    "validate_target",
    "crate_type",
    "binary_suffix",
    "binary_prefix",
    "verus_data",
    "verus_library",
    "get_dependencies",
]

SYSTEM_CRATES = frozenset({"vstd", "builtin", "builtin_macros"})
WORKSPACE_CRATES = frozenset({"vstd_extra", "aster_common"})

OUT_DIR = Path("target")


class WorkspaceError(RuntimeError):
    """Raised when the workspace layout or its artifacts are not as expected."""


@functools.cache
def all_targets() -> frozenset[str]:
    """Names of all workspace member packages, as reported by cargo."""
    try:
        result = subprocess.run(
            ["cargo", "metadata", "--no-deps", "--format-version", "1"],
            capture_output=True,
            text=True,
            check=True,
        )
        metadata = json.loads(result.stdout)
    except (OSError, subprocess.CalledProcessError, json.JSONDecodeError) as exc:
        raise WorkspaceError("Failed to get cargo metadata") from exc
    names = {pkg["id"]: pkg["name"] for pkg in metadata.get("packages", [])}
    try:
        return frozenset(names[member] for member in metadata.get("workspace_members", []))
    except KeyError as exc:
        raise WorkspaceError("Failed to find package") from exc


def validate_target(name: str, targets: frozenset[str] | set[str] | None = None) -> str:
    """Normalise a target name and check that it names a workspace crate."""
    if targets is None:
        targets = all_targets()
    while name.startswith(".\\"):
        name = name[2:]
    while name.endswith(os.sep):
        name = name[: -len(os.sep)]
    if name not in targets:
        raise WorkspaceError(f"Unknown target: {name}")
    return name


def crate_type(target: str) -> tuple[Path, str]:
    """Return the root source file of ``target`` and whether it is a lib or a bin."""
    root = Path(target) / "src"
    lib = root / "lib.rs"
    if lib.is_file():
        return lib, "lib"
    return root / "main.rs", "bin"


def binary_suffix(kind: str) -> str:
    """File extension of the artifact built for a crate of ``kind``."""
    match kind:
        case "lib":
            return "rlib"
        case "bin":
            return ""
    raise ValueError(f"Unknown crate type: {kind}")


def binary_prefix(kind: str) -> str:
    """File-name prefix of the artifact built for a crate of ``kind``."""
    match kind:
        case "lib":
            return "lib"
        case "bin":
            return ""
    raise ValueError(f"Unknown crate type: {kind}")


def verus_data(target: str) -> Path:
    """Path of the exported verification data of ``target``; it must exist."""
    path = OUT_DIR / f"{target}.verusdata"
    if not path.is_file():
        raise WorkspaceError(f"Cannot find the verus data file for target: {target}")
    return path


def verus_library(target: str) -> Path:
    """Path of the compiled artifact of ``target``; it must exist."""
    _, kind = crate_type(target)
    path = OUT_DIR / f"{binary_prefix(kind)}{target}.{binary_suffix(kind)}"
    if not path.is_file():
        raise WorkspaceError(f"Cannot find the library file for target: {target}")
    return path


def _simplify(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except OSError:
        return path


def get_dependencies(target: str) -> list[tuple[str, Path]]:
    """Local crate dependencies of ``target``, sorted by name, excluding system crates."""
    manifest_path = Path(target) / "Cargo.toml"
    try:
        content = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise WorkspaceError(f"Failed to read {manifest_path}") from exc
    try:
        manifest = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise WorkspaceError(f"Failed to parse {manifest_path}") from exc

    deps: list[tuple[str, Path]] = []
    for name, spec in sorted(manifest.get("dependencies", {}).items()):
        if name in SYSTEM_CRATES:
            continue
        if isinstance(spec, dict) and "path" in spec:
            local = Path(target) / spec["path"]
        else:
            local = Path(name)
        local = _simplify(local)
        if local.is_dir():
            deps.append((name, local))
    return deps