"""
ruledtree — streaming tree rendering with ASCII and Unicode ruled lines.

This package renders trees of text nodes in the style of the Unix ``tree``
command:

- :class:`TreePrinter` writes nodes to any text sink as they are opened and
  closed, without keeping the tree in memory,
- edge styles range from plain ASCII to fully custom Unicode box-drawing
  lines, with support for double width (East Asian) environments,
- multi-line node content is aligned under its ruled lines, without trailing
  whitespace on empty lines.

Ready-made drivers render ``anytree`` trees and directory structures.
"""

from __future__ import annotations

from .edge import ASCII, UNICODE_NARROW, UNICODE_WIDE, EdgeConfig, ItemStyle
from .errors import (
    ExtraCloseError,
    SinkWriteError,
    TreePrintError,
    UnsupportedEdgeCombinationError,
)
from .printer import PrinterOptions, TreePrinter
from .tree import draw_tree, path_tree, print_tree
from .unicode import (
    AmbiWidth,
    CornerStyle,
    DashLevel,
    Dashed,
    Double,
    EdgeWidth,
    Solid,
    UnicodeEdge,
    UnicodeEdgeSpec,
    unicode_edge,
)

__all__ = [
    "ASCII",
    "UNICODE_NARROW",
    "UNICODE_WIDE",
    "AmbiWidth",
    "CornerStyle",
    "DashLevel",
    "Dashed",
    "Double",
    "EdgeConfig",
    "EdgeWidth",
    "ExtraCloseError",
    "ItemStyle",
    "PrinterOptions",
    "SinkWriteError",
    "Solid",
    "TreePrintError",
    "TreePrinter",
    "UnicodeEdge",
    "UnicodeEdgeSpec",
    "UnsupportedEdgeCombinationError",
    "draw_tree",
    "path_tree",
    "print_tree",
    "unicode_edge",
]
