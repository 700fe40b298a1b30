import os

import pytest

from pipexpy.resolve import CommandError, extract_path, find_in_path, resolve_command


def _make_exe(path, mode=0o755):
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_extract_path_splits_on_colon():
    assert extract_path({"PATH": "/usr/bin:/bin"}) == ["/usr/bin", "/bin"]


def test_extract_path_drops_empty_entries():
    assert extract_path({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_extract_path_missing():
    assert extract_path({"HOME": "/tmp"}) is None


def test_find_in_path_finds_executable(tmp_path):
    exe = _make_exe(tmp_path / "tool")
    env = {"PATH": f"/nonexistent_dir:{tmp_path}"}
    assert find_in_path("tool", env) == str(exe)


def test_find_in_path_skips_non_executable(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_exe(first / "tool", 0o644)
    exe = _make_exe(second / "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_in_path("tool", env) == str(exe)


def test_find_in_path_missing(tmp_path):
    assert find_in_path("tool", {"PATH": str(tmp_path)}) is None
    assert find_in_path("tool", {}) is None


def test_resolve_by_path_lookup(tmp_path):
    exe = _make_exe(tmp_path / "tool")
    path, args = resolve_command("tool -x", ["tool", "-x"], {"PATH": str(tmp_path)})
    assert path == str(exe)
    assert args == ["tool", "-x"]


def test_resolve_absolute_path(tmp_path):
    exe = _make_exe(tmp_path / "tool")
    path, args = resolve_command(str(exe), [str(exe)], {})
    assert path == str(exe)
    assert args == [str(exe)]


def test_resolve_absolute_path_without_permission(tmp_path):
    exe = _make_exe(tmp_path / "tool", 0o644)
    with pytest.raises(CommandError, match="permissions"):
        resolve_command(str(exe), [str(exe)], {})


def test_resolve_path_with_arguments_uses_first_arg(tmp_path):
    exe = str(tmp_path / "tool")
    cmd = f"{exe} -l"
    path, args = resolve_command(cmd, [exe, "-l"], {})
    assert path == exe
    assert args == [exe, "-l"]


def test_resolve_unknown_command(tmp_path):
    with pytest.raises(CommandError, match="No vailable command"):
        resolve_command("nosuch", ["nosuch"], {"PATH": str(tmp_path)})


def test_resolve_unquotes_arguments(tmp_path):
    _make_exe(tmp_path / "tr")
    _, args = resolve_command("tr 'a' 'b'", ["tr", "'a'", "'b'"], {"PATH": str(tmp_path)})
    assert args == ["tr", "a", "b"]


def test_resolve_empty_args():
    with pytest.raises(CommandError):
        resolve_command("", [], {"PATH": "/bin"})