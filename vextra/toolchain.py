"""Locate the external tools the workspace commands run."""

from __future__ import annotations

import functools
import os
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

__all__ = [
    "ToolNotFoundError",
    "binary_name",
    "locate_from_path",
    "locate_from_hints",
    "locate_from_env",
    "absolutize",
    "locate",
    "find_verus",
    "find_z3",
    "find_rustfilt",
    "find_objdump",
]

VERUS_HINT = Path("tools/verus/source/target-verus/release")
Z3_HINT = Path("tools/verus/source")


class ToolNotFoundError(FileNotFoundError):
    """Raised when a required tool cannot be found or installed."""


def binary_name(base: str) -> str:
    """Return the executable name of ``base`` on this platform."""
    if sys.platform == "win32":
        return f"{base}.exe"
    return base


def locate_from_path(binary: str | os.PathLike[str]) -> Path | None:
    """Find ``binary`` in a directory listed in ``PATH``."""
    paths = os.environ.get("PATH")
    if paths is None:
        return None
    for directory in paths.split(os.pathsep):
        candidate = Path(directory) / binary
        if candidate.is_file():
            return candidate
    return None


def locate_from_hints(
    binary: str | os.PathLike[str], hints: Iterable[str | os.PathLike[str]]
) -> Path | None:
    """Find ``binary`` in the first hint directory that contains it."""
    for hint in hints:
        candidate = Path(hint) / binary
        if candidate.is_file():
            return candidate
    return None


def locate_from_env(binary: str | os.PathLike[str], env_var: str) -> Path | None:
    """Find ``binary`` through an environment variable naming it or its directory."""
    value = os.environ.get(env_var)
    if value is None:
        return None
    candidate = Path(value)
    if candidate.is_file():
        return candidate
    candidate = candidate / binary
    if candidate.is_file():
        return candidate
    return None


def absolutize(path: str | os.PathLike[str]) -> Path:
    """Make ``path`` absolute against the current directory."""
    path = Path(path)
    if path.is_absolute():
        return path
    return Path.cwd() / path


def locate(
    binary: str | os.PathLike[str],
    env_var: str | None,
    hints: Iterable[str | os.PathLike[str]],
) -> Path | None:
    """Look for ``binary`` via ``env_var``, then the hints, then ``PATH``."""
    found = None
    if env_var is not None:
        found = locate_from_env(binary, env_var)
    if found is None:
        found = locate_from_hints(binary, hints)
    if found is None:
        found = locate_from_path(binary)
    return absolutize(found) if found is not None else None


def _cargo_install(name: str) -> None:
    subprocess.run(["cargo", "install", name], check=False)


@functools.cache
def find_verus() -> Path:
    """Return the verifier binary."""
    found = locate(binary_name("verus"), "VERUS_PATH", [VERUS_HINT])
    if found is None:
        raise ToolNotFoundError(
            "Cannot find the Verus binary, please set the VERUS_PATH environment "
            "variable or add it to your PATH"
        )
    return found


def find_z3() -> Path:
    """Return the Z3 solver binary."""
    found = locate(binary_name("z3"), "VERUS_Z3_PATH", [Z3_HINT])
    if found is None:
        raise ToolNotFoundError(
            "Cannot find the Z3 binary, please set the VERUS_Z3_PATH environment "
            "variable or add it to your PATH"
        )
    return found


@functools.cache
def find_rustfilt() -> Path:
    """Return the symbol demangler, installing it with cargo when missing."""
    name = binary_name("rustfilt")
    found = locate(name, None, [])
    if found is None:
        _cargo_install("rustfilt")
        found = locate(name, None, [])
    if found is None:
        raise ToolNotFoundError("Failed to find or install rustfilt")
    return found


@functools.cache
def find_objdump() -> Path:
    """Return the disassembler, honouring ``LLVM_OBJDUMP`` and installing when missing."""
    explicit = os.environ.get("LLVM_OBJDUMP")
    if explicit is not None:
        return Path(explicit)
    found = locate("llvm-objdump", None, [])
    if found is None:
        _cargo_install("cargo-binutils")
        found = locate("llvm-objdump", None, [])
    if found is None:
        raise ToolNotFoundError(
            "Failed to find or install llvm-objdump, please specify `LLVM_OBJDUMP` "
            "as the path to the executable"
        )
    return found