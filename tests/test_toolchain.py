import os
import sys
from pathlib import Path
from unittest import mock

import pytest

from vextra import toolchain
from vextra.toolchain import (
    ToolNotFoundError,
    absolutize,
    binary_name,
    find_objdump,
    find_rustfilt,
    find_verus,
    find_z3,
    locate,
    locate_from_env,
    locate_from_hints,
    locate_from_path,
)


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    for fn in (find_verus, find_rustfilt, find_objdump):
        fn.cache_clear()
    empty = tmp_path / "empty_path"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    for var in ("VERUS_PATH", "VERUS_Z3_PATH", "LLVM_OBJDUMP"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    for fn in (find_verus, find_rustfilt, find_objdump):
        fn.cache_clear()


def _make(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / name
    target.write_text("")
    return target


def test_binary_name_posix(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert binary_name("verus") == "verus"


def test_binary_name_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert binary_name("verus") == "verus.exe"


def test_locate_from_path_finds_file(tmp_path, monkeypatch):
    first = tmp_path / "a"
    first.mkdir()
    target = _make(tmp_path / "b", "tool")
    monkeypatch.setenv("PATH", os.pathsep.join([str(first), str(tmp_path / "b")]))
    assert locate_from_path("tool") == target


def test_locate_from_path_missing():
    assert locate_from_path("nothing-here") is None


def test_locate_from_hints_first_match(tmp_path):
    a = _make(tmp_path / "h1", "tool")
    _make(tmp_path / "h2", "tool")
    assert locate_from_hints("tool", [tmp_path / "none", tmp_path / "h1", tmp_path / "h2"]) == a
    assert locate_from_hints("tool", [tmp_path / "none"]) is None


def test_locate_from_env_file_and_directory(tmp_path, monkeypatch):
    target = _make(tmp_path / "bin", "tool")
    monkeypatch.setenv("TOOL_HOME", str(target))
    assert locate_from_env("tool", "TOOL_HOME") == target
    monkeypatch.setenv("TOOL_HOME", str(tmp_path / "bin"))
    assert locate_from_env("tool", "TOOL_HOME") == target


def test_locate_from_env_unset():
    assert locate_from_env("tool", "TOOL_HOME_UNSET") is None


def test_absolutize(tmp_path):
    assert absolutize("x/y") == tmp_path / "x" / "y"
    assert absolutize(tmp_path / "z") == tmp_path / "z"


def test_locate_prefers_env_then_hints_then_path(tmp_path, monkeypatch):
    env_tool = _make(tmp_path / "env", "tool")
    hint_tool = _make(tmp_path / "hint", "tool")
    path_tool = _make(tmp_path / "path", "tool")
    monkeypatch.setenv("PATH", str(tmp_path / "path"))
    monkeypatch.setenv("TOOL_HOME", str(tmp_path / "env"))
    assert locate("tool", "TOOL_HOME", [tmp_path / "hint"]) == env_tool
    monkeypatch.delenv("TOOL_HOME")
    assert locate("tool", "TOOL_HOME", [tmp_path / "hint"]) == hint_tool
    assert locate("tool", None, []) == path_tool


def test_locate_returns_absolute_for_relative_hint(tmp_path):
    _make(tmp_path / "rel", "tool")
    found = locate("tool", None, ["rel"])
    assert found.is_absolute()
    assert found == tmp_path / "rel" / "tool"


def test_find_verus_from_env(tmp_path, monkeypatch):
    target = _make(tmp_path / "v", binary_name("verus"))
    monkeypatch.setenv("VERUS_PATH", str(tmp_path / "v"))
    assert find_verus() == target


def test_find_verus_from_default_hint(tmp_path):
    target = _make(tmp_path / toolchain.VERUS_HINT, binary_name("verus"))
    assert find_verus() == target


def test_find_verus_missing():
    with pytest.raises(ToolNotFoundError, match="VERUS_PATH"):
        find_verus()


def test_find_z3(tmp_path, monkeypatch):
    with pytest.raises(ToolNotFoundError, match="VERUS_Z3_PATH"):
        find_z3()
    target = _make(tmp_path / "z", binary_name("z3"))
    monkeypatch.setenv("VERUS_Z3_PATH", str(target))
    assert find_z3() == target


def test_find_rustfilt_on_path(tmp_path, monkeypatch):
    target = _make(tmp_path / "tools", binary_name("rustfilt"))
    monkeypatch.setenv("PATH", str(tmp_path / "tools"))
    with mock.patch("vextra.toolchain.subprocess.run") as run:
        assert find_rustfilt() == target
    run.assert_not_called()


def test_find_rustfilt_installs_then_fails():
    with mock.patch("vextra.toolchain.subprocess.run") as run:
        with pytest.raises(ToolNotFoundError):
            find_rustfilt()
    run.assert_called_once_with(["cargo", "install", "rustfilt"], check=False)


def test_find_objdump_env_override(monkeypatch):
    monkeypatch.setenv("LLVM_OBJDUMP", "/opt/llvm/bin/llvm-objdump")
    assert find_objdump() == Path("/opt/llvm/bin/llvm-objdump")


def test_find_objdump_installs_then_fails():
    with mock.patch("vextra.toolchain.subprocess.run") as run:
        with pytest.raises(ToolNotFoundError, match="LLVM_OBJDUMP"):
            find_objdump()
    run.assert_called_once_with(["cargo", "install", "cargo-binutils"], check=False)