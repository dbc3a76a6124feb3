# ruledtree/writer.py

"""
Line decoration for a stack of open nodes.

:class:`ItemWriter` is a small file-like object: text written to it is split
into lines, and every line is preceded by the prefixes and paddings of all
open nodes, from the outermost to the innermost one.

Decoration is emitted lazily. A depth draws its prefix and padding only once
per physical line, right before the first content of that line reaches the
sink, so node content can be streamed in arbitrary chunks. Empty lines do not
receive trailing whitespace unless ``emit_trailing_whitespace`` is set: the
decoration stops after the last visible ruled line character.
"""


from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, MutableSequence, Protocol

from ruledtree.edge import EdgeConfig, ItemStyle, PrefixPart
from ruledtree.errors import SinkWriteError
from ruledtree.lines import iter_lines


class TextSink(Protocol):
    """Anything accepting text through ``write``, e.g. ``io.StringIO``."""

    def write(self, s: str, /) -> object: ...


class LineEdgeStatus(IntEnum):
    """Decoration progress of one depth on the current line."""

    LINE_START = 0
    PREFIX_EMITTED = 1
    PADDING_EMITTED = 2


@dataclass
class ItemState:
    """
    Emission state of one open node.

    ``is_last_child`` and ``edge`` come from the node's :class:`ItemStyle` and
    never change. ``at_first_line`` and ``edge_status`` follow the lines
    written while the node is open.
    """

    is_last_child: bool
    edge: EdgeConfig
    at_first_line: bool = True
    edge_status: LineEdgeStatus = LineEdgeStatus.LINE_START

    @classmethod
    def from_style(cls, style: ItemStyle) -> ItemState:
        return cls(style.is_last_child, style.edge)

    @property
    def is_at_line_head(self) -> bool:
        return self.edge_status is LineEdgeStatus.LINE_START

    def is_prefix_whitespace(self) -> bool:
        return self.edge.is_prefix_whitespace(self.is_last_child, self.at_first_line)

    def write_prefix(self, emit: Callable[[str], None]) -> None:
        assert (
            self.edge_status is LineEdgeStatus.LINE_START
        ), "Prefix should be emitted only once for each line"
        self.edge_status = LineEdgeStatus.PREFIX_EMITTED
        emit(self.edge.edge(self.is_last_child, self.at_first_line, PrefixPart.PREFIX))

    def write_padding(self, emit: Callable[[str], None]) -> None:
        assert (
            self.edge_status is LineEdgeStatus.PREFIX_EMITTED
        ), "Padding should be emitted only once, right after the line prefix"
        self.edge_status = LineEdgeStatus.PADDING_EMITTED
        emit(self.edge.edge(self.is_last_child, self.at_first_line, PrefixPart.PADDING))

    def reset_line_state(self) -> None:
        self.at_first_line = False
        self.edge_status = LineEdgeStatus.LINE_START


class ItemWriter:
    """
    File-like writer decorating text with the prefixes of open nodes.

    The writer borrows ``states``: it advances their line state but never adds
    or removes entries. ``states[0]`` is the outermost open node.

    Parameters
    ----------
    sink : TextSink
        Destination of the decorated text. Only ``write`` is ever called.
    states : MutableSequence[ItemState]
        States of the open nodes. May be empty, in which case text is
        forwarded undecorated.
    emit_trailing_whitespace : bool, default=False
        Whether empty lines get the full padding of every depth.

    Examples
    --------
    >>> import io
    >>> from ruledtree.edge import ASCII
    >>> buf = io.StringIO()
    >>> ItemWriter(buf, [ItemState(False, ASCII)]).write("foo\\n\\nbar")
    8
    >>> buf.getvalue()
    '|-- foo\\n|\\n|   bar'
    """

    def __init__(
        self,
        sink: TextSink,
        states: MutableSequence[ItemState],
        *,
        emit_trailing_whitespace: bool = False,
    ) -> None:
        self._sink = sink
        self._states = states
        self._emit_trailing_whitespace = emit_trailing_whitespace

    def write(self, text: str) -> int:
        """
        Write text, decorating each line that receives content.

        A trailing newline is written immediately, but the decoration of the
        following line is deferred until content for it arrives.

        Raises
        ------
        SinkWriteError
            If the sink raises ``OSError``.
        """

        for line, is_last in iter_lines(text):
            if is_last and not line:
                break

            self._write_prefix_and_padding(line_is_empty=not line)
            self._emit(line)

            if not is_last:
                self._emit("\n")
                self._reset_line_state()

        return len(text)

    def go_to_next_line(self) -> None:
        """Write a newline unless the innermost node is at the head of a line."""

        assert self._states, "go_to_next_line requires at least one open node"
        if not self._states[-1].is_at_line_head:
            self.write("\n")
        assert self._states[-1].is_at_line_head

    def _emit(self, s: str) -> None:
        if not s:
            return
        try:
            self._sink.write(s)
        except OSError as e:
            raise SinkWriteError(f"Failed to write to sink: {e}") from e

    def _last_significant_depth(self, emit_last_padding: bool) -> int | None:
        if emit_last_padding:
            return len(self._states) - 1
        for depth in range(len(self._states) - 1, -1, -1):
            if not self._states[depth].is_prefix_whitespace():
                return depth
        return None

    def _write_prefix_and_padding(self, line_is_empty: bool) -> None:
        if not self._states:
            return

        # The padding of the deepest visible edge is trailing whitespace on an empty line.
        emit_last_padding = self._emit_trailing_whitespace or not line_is_empty
        last = self._last_significant_depth(emit_last_padding)
        if last is None:
            return

        for state in self._states[:last]:
            if state.edge_status is LineEdgeStatus.LINE_START:
                state.write_prefix(self._emit)
            if state.edge_status is LineEdgeStatus.PREFIX_EMITTED:
                state.write_padding(self._emit)
            assert state.edge_status is LineEdgeStatus.PADDING_EMITTED

        state = self._states[last]
        if state.edge_status is LineEdgeStatus.LINE_START:
            state.write_prefix(self._emit)
        if state.edge_status is LineEdgeStatus.PREFIX_EMITTED and emit_last_padding:
            state.write_padding(self._emit)

    def _reset_line_state(self) -> None:
        for state in self._states:
            state.reset_line_state()
