# tests/test_tree.py
import io
import os
import stat
import sys
from pathlib import Path

import pytest

from ruledtree import ASCII, PrinterOptions, path_tree, print_tree


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _lines(s: str):
    return s.splitlines()


def test_single_level_sorted_dirs_first(tmp_path: Path):
    # Root contains two dirs and two files
    (tmp_path / "bDir").mkdir()
    (tmp_path / "ADir").mkdir()
    _make_file(tmp_path / "z.txt")
    _make_file(tmp_path / "A.txt")

    lines = _lines(path_tree(tmp_path))

    # First line is the resolved root path
    assert lines[0] == str(tmp_path.resolve())
    # Dirs first (case-insensitive), then files (case-insensitive)
    assert lines[1:] == [
        "├── ADir",
        "├── bDir",
        "├── A.txt",
        "└── z.txt",
    ]


def test_nested_structure(tmp_path: Path):
    # project/
    #   src/
    #     a.py
    #   docs/
    #     readme.md
    (tmp_path / "src").mkdir()
    (tmp_path / "docs").mkdir()
    _make_file(tmp_path / "src/a.py")
    _make_file(tmp_path / "docs/readme.md")

    out = path_tree(tmp_path)
    assert out.endswith("\n")
    assert _lines(out)[1:] == [
        "├── docs",
        "│   └── readme.md",
        "└── src",
        "    └── a.py",
    ]


def test_ascii_edge_and_no_trailing_newline(tmp_path: Path):
    _make_file(tmp_path / "pkg/keep.py")
    _make_file(tmp_path / "top.txt")

    out = path_tree(tmp_path, edge=ASCII, options=PrinterOptions(emit_trailing_newline=False))
    assert out.endswith("`-- top.txt")
    assert _lines(out)[1:] == [
        "|-- pkg",
        "|   `-- keep.py",
        "`-- top.txt",
    ]


def test_include_prunes_subtrees(tmp_path: Path):
    (tmp_path / "pkg/__pycache__").mkdir(parents=True)
    _make_file(tmp_path / "pkg/keep.py")
    _make_file(tmp_path / "pkg/__pycache__/drop.pyc")
    _make_file(tmp_path / "top.log")
    _make_file(tmp_path / "top.txt")

    out = path_tree(tmp_path, include=lambda p: p.name != "__pycache__" and p.suffix != ".log")

    assert "__pycache__" not in out
    assert "drop.pyc" not in out
    assert "top.log" not in out
    assert _lines(out)[1:] == [
        "├── pkg",
        "│   └── keep.py",
        "└── top.txt",
    ]


def test_empty_directory_prints_only_root(tmp_path: Path):
    assert path_tree(tmp_path) == f"{tmp_path.resolve()}\n"


def test_print_tree_streams_to_file(tmp_path: Path):
    _make_file(tmp_path / "a.txt")
    buf = io.StringIO()
    assert print_tree(tmp_path, file=buf) is None
    assert buf.getvalue() == path_tree(tmp_path)


def test_print_tree_defaults_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    _make_file(tmp_path / "a.txt")
    print_tree(tmp_path)
    captured = capsys.readouterr()
    assert captured.out == f"{tmp_path.resolve()}\n└── a.txt\n"


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlink_dir_flag(tmp_path: Path):
    # real/
    #   inside.txt
    # linkdir -> real (symlink)
    real = tmp_path / "real"
    real.mkdir()
    _make_file(real / "inside.txt")
    (tmp_path / "linkdir").symlink_to(real, target_is_directory=True)

    # ---- Case 1: follow_symlinks = False
    assert _lines(path_tree(tmp_path, follow_symlinks=False))[1:] == [
        "├── linkdir",
        "└── real",
        "    └── inside.txt",
    ]

    # ---- Case 2: follow_symlinks = True
    assert _lines(path_tree(tmp_path, follow_symlinks=True))[1:] == [
        "├── linkdir",
        "│   └── inside.txt",
        "└── real",
        "    └── inside.txt",
    ]


@pytest.mark.skipif(not os.name == "posix", reason="Permission bits test is POSIX-only")
@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permission bits")
def test_unreadable_directory_is_skipped_safely(tmp_path: Path):
    secret = tmp_path / "secret"
    secret.mkdir()
    _make_file(secret / "hidden.txt")

    # remove read/execute so iterdir raises PermissionError
    secret.chmod(0)
    try:
        lines = _lines(path_tree(tmp_path))
        # directory exists as a node, but children couldn't be listed
        assert lines[1:] == ["└── secret"]
    finally:
        # restore perms to avoid cleanup issues on some systems
        secret.chmod(stat.S_IRWXU)
