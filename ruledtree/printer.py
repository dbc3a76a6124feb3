# ruledtree/printer.py

"""
Streaming tree printer.

:class:`TreePrinter` renders a tree driven by explicit ``open_node`` and
``close_node`` calls. Each node's content is written to the sink as soon as
it is given, decorated with the ruled lines of all open ancestors; the tree
itself is never kept in memory, only the stack of currently open nodes.

Example
-------
>>> import io
>>> from ruledtree import ASCII, ItemStyle, TreePrinter
>>> buf = io.StringIO()
>>> printer = TreePrinter(buf)
>>> printer.write(".\\n")
>>> printer.open_node(ItemStyle(False, ASCII), "foo")
>>> printer.open_node(ItemStyle(True, ASCII), "bar\\nbar2")
>>> printer.close_node()
>>> printer.close_node()
>>> printer.open_node(ItemStyle(True, ASCII), "baz")
>>> print(printer.finalize().getvalue(), end="")
.
|-- foo
|   `-- bar
|       bar2
`-- baz
"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar, Union

from ruledtree.edge import ItemStyle
from ruledtree.errors import ExtraCloseError
from ruledtree.writer import ItemState, ItemWriter, TextSink

logger = logging.getLogger(__name__)

SinkT = TypeVar("SinkT", bound=TextSink)


@dataclass(frozen=True)
class PrinterOptions:
    """
    Rendering options of a :class:`TreePrinter`.

    Parameters
    ----------
    emit_trailing_whitespace : bool, default=False
        Pad empty content lines with the full decoration of every depth. By
        default an empty line stops right after its last visible ruled line.
    emit_trailing_newline : bool, default=True
        End the current line when a node is closed. When disabled, the last
        node of the tree is not followed by a newline.
    """

    emit_trailing_whitespace: bool = False
    emit_trailing_newline: bool = True


class TreePrinter(Generic[SinkT]):
    """
    Render a tree into a text sink, one node at a time.

    Parameters
    ----------
    sink : TextSink
        Append-only destination, e.g. ``io.StringIO`` or ``sys.stdout``. The
        printer never reads, flushes or closes it.
    options : PrinterOptions | None, optional
        Rendering options. Defaults to ``PrinterOptions()``.
    """

    def __init__(self, sink: SinkT, options: Optional[PrinterOptions] = None) -> None:
        self._sink = sink
        self._options = options if options is not None else PrinterOptions()
        self._states: list[ItemState] = []
        # Set when a root-level node was closed in the middle of a line.
        self._pending_newline = False

    @property
    def depth(self) -> int:
        """Number of currently open nodes."""
        return len(self._states)

    @property
    def options(self) -> PrinterOptions:
        return self._options

    def _writer(self) -> ItemWriter:
        return ItemWriter(
            self._sink,
            self._states,
            emit_trailing_whitespace=self._options.emit_trailing_whitespace,
        )

    def open_node(self, style: ItemStyle, content: Union[str, Iterable[str]] = "") -> None:
        """
        Open a child of the innermost open node and write its content.

        Parameters
        ----------
        style : ItemStyle
            Decoration of the new node.
        content : str | Iterable[str], default=""
            Node text. An iterable is consumed chunk by chunk, each chunk being
            written as soon as it is produced.

        Raises
        ------
        SinkWriteError
            If the sink fails.
        """

        if self._states:
            self._writer().go_to_next_line()
        elif self._pending_newline:
            self._writer().write("\n")
        self._pending_newline = False

        self._states.append(ItemState.from_style(style))
        logger.debug("Opened node at depth %d (last child: %s)", len(self._states), style.is_last_child)

        if isinstance(content, str):
            content = (content,)
        writer = self._writer()
        for chunk in content:
            writer.write(chunk)

    def write(self, text: str) -> None:
        """
        Append text to the innermost open node.

        With no open node the text is written without decoration, which is
        how a root label is usually printed.

        Raises
        ------
        SinkWriteError
            If the sink fails.
        """

        if text and not self._states and self._pending_newline:
            self._writer().write("\n")
            self._pending_newline = False
        self._writer().write(text)

    def close_node(self) -> None:
        """
        Close the innermost open node.

        Raises
        ------
        ExtraCloseError
            If no node is open.
        SinkWriteError
            If the sink fails.
        """

        if not self._states:
            raise ExtraCloseError()

        if self._options.emit_trailing_newline:
            self._writer().go_to_next_line()

        state = self._states.pop()
        if not self._states and not state.is_at_line_head:
            self._pending_newline = True
        logger.debug("Closed node at depth %d", len(self._states) + 1)

    def finalize(self) -> SinkT:
        """
        Close every open node, innermost first, and return the sink.

        Raises
        ------
        SinkWriteError
            If the sink fails.
        """

        if self._states:
            logger.debug("Finalizing with %d open node(s)", len(self._states))
        while self._states:
            self.close_node()
        return self._sink
