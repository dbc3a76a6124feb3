# ruledtree/tree.py

"""
Ready-made drivers for common trees.

The printer itself only follows ``open_node``/``close_node`` calls. This
module walks two kinds of existing trees and issues those calls:

- :func:`draw_tree` renders an ``anytree`` node and its descendants,
- :func:`print_tree` and :func:`path_tree` render a directory structure,
  similar to the Unix ``tree`` command.

Filesystem traversal is deterministic (directories first, case-insensitive
sorting), supports optional symbolic link following, and relies on strict
pruning-based filtering: if a directory is excluded, its entire subtree is
skipped.
"""


from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from anytree import NodeMixin

from ruledtree.edge import UNICODE_NARROW, EdgeConfig, ItemStyle
from ruledtree.printer import PrinterOptions, TreePrinter
from ruledtree.writer import TextSink

logger = logging.getLogger(__name__)


def draw_tree(
    node: NodeMixin,
    *,
    edge: EdgeConfig = UNICODE_NARROW,
    node_renderer: Callable[[NodeMixin], str] = lambda n: str(n.name),
    options: Optional[PrinterOptions] = None,
) -> str:
    """
    Render an ``anytree`` tree as text.

    The root is written undecorated on the first line; every descendant is
    drawn below its parent in child order. Node text may span several lines.

    Parameters
    ----------
    node : anytree.NodeMixin
        Root of the tree to render.
    edge : EdgeConfig, default=UNICODE_NARROW
        Ruled line style used for every node.
    node_renderer : Callable[[anytree.NodeMixin], str], optional
        Returns the text of a node. Defaults to ``str(node.name)``.
    options : PrinterOptions | None, optional
        Printer options.

    Returns
    -------
    str
        The rendered tree, ending with a newline unless
        ``options.emit_trailing_newline`` is disabled.
    """

    printer = TreePrinter(io.StringIO(), options)
    printer.write(node_renderer(node) + "\n")

    def rec(parent: NodeMixin) -> None:
        children = parent.children
        for i, child in enumerate(children):
            printer.open_node(ItemStyle(i == len(children) - 1, edge), node_renderer(child))
            rec(child)
            printer.close_node()

    rec(node)
    return printer.finalize().getvalue()


def is_dir(p: Path) -> bool:
    """
    Safely determine whether a path refers to a directory.

    Returns ``False`` if the directory status cannot be determined, e.g.
    because of a permission error.
    """

    try:
        return p.is_dir()
    except OSError:
        return False


def iter_children(d: Path) -> list[Path]:
    """
    Return the immediate children of a directory in stable tree order.

    Directories come before files, and entries are ordered case-insensitively
    by name. An unreadable directory has no children.
    """

    try:
        children = list(d.iterdir())
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", d, e)
        return []
    children.sort(key=lambda p: (not is_dir(p), p.name.casefold()))
    return children


def print_tree(
    root: Path,
    *,
    edge: EdgeConfig = UNICODE_NARROW,
    follow_symlinks: bool = False,
    include: Callable[[Path], bool] = lambda p: True,
    options: Optional[PrinterOptions] = None,
    file: Optional[TextSink] = None,
) -> None:
    """
    Stream a directory tree to a text sink.

    The first line is the resolved root path. Entries are written while the
    filesystem is traversed, so large trees start printing immediately.

    Parameters
    ----------
    root : pathlib.Path
        Root directory to display.
    edge : EdgeConfig, default=UNICODE_NARROW
        Ruled line style.
    follow_symlinks : bool, default=False
        Whether to descend into symbolic links to directories.
    include : Callable[[pathlib.Path], bool], optional
        Predicate used to filter paths. If it returns ``False`` for a path,
        that path is neither displayed nor traversed.
    options : PrinterOptions | None, optional
        Printer options.
    file : TextSink | None, optional
        Destination. Defaults to ``sys.stdout``.

    Raises
    ------
    OSError
        If the root path cannot be resolved.
    SinkWriteError
        If writing to ``file`` fails.
    """

    root = root.resolve()
    printer = TreePrinter(file if file is not None else sys.stdout, options)
    printer.write(f"{root}\n")

    def rec(d: Path) -> None:
        # Prune + hide are the same here: if include() is False, we neither show nor descend.
        children = [c for c in iter_children(d) if include(c)]
        for i, child in enumerate(children):
            printer.open_node(ItemStyle(i == len(children) - 1, edge), child.name)
            if is_dir(child) and (follow_symlinks or not child.is_symlink()):
                rec(child)
            printer.close_node()

    rec(root)
    printer.finalize()


def path_tree(
    root: Path,
    *,
    edge: EdgeConfig = UNICODE_NARROW,
    follow_symlinks: bool = False,
    include: Callable[[Path], bool] = lambda p: True,
    options: Optional[PrinterOptions] = None,
) -> str:
    """
    Render a directory tree and return it as a string.

    Accepts the same arguments as :func:`print_tree`, except ``file``.
    """

    buf = io.StringIO()
    print_tree(
        root,
        edge=edge,
        follow_symlinks=follow_symlinks,
        include=include,
        options=options,
        file=buf,
    )
    return buf.getvalue()
