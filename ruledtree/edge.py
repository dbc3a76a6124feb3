# ruledtree/edge.py

"""
Edge glyph tables.

An edge configuration decides which characters are drawn in front of a line
of node content at one depth of the tree. Each depth draws a *prefix* (the
ruled line characters such as ``|--`` or ``├──``) followed by a *padding*
(whitespace separating the prefix from the content or from the next depth).

The characters only depend on three facts:

- whether the line is the first line of the node,
- whether the node is the last child of its parent,
- whether the prefix or the padding is requested.

This module provides the fixed tables reproducing the Unix ``tree`` command
(:data:`ASCII`, :data:`UNICODE_NARROW`) and a variant for environments where
ruled line characters are rendered double width (:data:`UNICODE_WIDE`).
Fully custom Unicode styles live in :mod:`ruledtree.unicode`.
"""


from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class PrefixPart(Enum):
    """Part of the decoration drawn at one depth."""

    PREFIX = "prefix"
    PADDING = "padding"


class EdgeConfig(ABC):
    """Maps a position in the tree to the decoration characters for it."""

    @abstractmethod
    def edge(self, last_child: bool, first_line: bool, part: PrefixPart) -> str:
        """
        Return the characters to draw for a position.

        Parameters
        ----------
        last_child : bool
            Whether the node is the last child of its parent.
        first_line : bool
            Whether the line is the first line of the node content.
        part : PrefixPart
            Whether the prefix or the padding is requested.

        Returns
        -------
        str
            The exact characters to write. May be empty.
        """

    def is_prefix_whitespace(self, last_child: bool, first_line: bool) -> bool:
        """
        Report whether prefix and padding for a position are whitespace only.

        An empty prefix counts as whitespace. Every style shipped with this
        package draws nothing but spaces on the continuation lines of a last
        child, and something visible everywhere else.
        """

        return last_child and not first_line


_TableKey = tuple[bool, bool, PrefixPart]

_ALL_KEYS: frozenset[_TableKey] = frozenset(
    (first_line, last_child, part)
    for first_line in (True, False)
    for last_child in (True, False)
    for part in PrefixPart
)


@dataclass(frozen=True)
class EdgeTable(EdgeConfig):
    """
    Edge configuration backed by an explicit lookup table.

    The table is keyed by ``(first_line, last_child, part)`` and must cover
    all eight combinations.
    """

    name: str
    table: Mapping[_TableKey, str] = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        missing = _ALL_KEYS - set(self.table)
        if missing:
            raise ValueError(f"Edge table {self.name!r} is missing {sorted(missing, key=repr)}")

    def edge(self, last_child: bool, first_line: bool, part: PrefixPart) -> str:
        return self.table[(first_line, last_child, part)]


def _table(
    name: str,
    *,
    last_first: str,
    preceding_first: str,
    vertical: str,
    last_padding: str,
) -> EdgeTable:
    prefix, padding = PrefixPart.PREFIX, PrefixPart.PADDING
    return EdgeTable(
        name,
        {
            (True, True, prefix): last_first,
            (True, False, prefix): preceding_first,
            (True, True, padding): " ",
            (True, False, padding): " ",
            (False, True, prefix): "",
            (False, True, padding): last_padding,
            (False, False, prefix): vertical,
            (False, False, padding): "   ",
        },
    )


ASCII = _table(
    "ascii",
    last_first="`--",
    preceding_first="|--",
    vertical="|",
    last_padding="    ",
)
"""Standard ASCII tree, as printed by ``tree`` with ``LANG=C``.

::

    .
    |-- foo
    |   |-- bar
    |   |   `-- baz
    |   |
    |   |       baz2
    |   `-- qux
    |       `-- quux
    |-- corge
    `-- grault
"""

UNICODE_NARROW = _table(
    "unicode-narrow",
    last_first="└──",
    preceding_first="├──",
    vertical="│",
    last_padding="    ",
)
"""Unicode ruled lines assuming single width glyphs.

This is what ``tree`` prints in a UTF-8 locale::

    .
    ├── foo
    │   ├── bar
    │   │   └── baz
    │   │
    │   │       baz2
    │   └── qux
    │       └── quux
    ├── corge
    └── grault

CJK fonts usually draw ruled lines double width; use :data:`UNICODE_WIDE`
there.
"""

UNICODE_WIDE = _table(
    "unicode-wide",
    last_first="└─",
    preceding_first="├─",
    vertical="│",
    last_padding="     ",
)
"""Unicode ruled lines assuming double width glyphs (East Asian fonts).

One indentation level is five columns wide instead of four::

    .
    ├─ foo
    │   ├─ bar
    │   │   └─ baz
    │   │
    │   │        baz2
    │   └─ qux
    │        └─ quux
    ├─ corge
    └─ grault
"""


@dataclass(frozen=True)
class ItemStyle:
    """Decoration style of a single node, fixed when the node is opened."""

    is_last_child: bool
    edge: EdgeConfig = ASCII
