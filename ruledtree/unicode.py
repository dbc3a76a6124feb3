# ruledtree/unicode.py

"""
Custom Unicode ruled line styles.

A Unicode edge style is described along four independent axes:

- ``vertical_backward``: the line above a junction, toward the parent,
- ``vertical_forward``: the line below a junction, toward later siblings,
- ``horizontal``: the line after a junction, toward the node content,
- ``corner``: the shape of the junction of a last child.

The box-drawing block of Unicode does not contain a character for every
combination of these axes, so :meth:`UnicodeEdgeSpec.build` may fail with
:class:`~ruledtree.errors.UnsupportedEdgeCombinationError`. A successfully
built :class:`UnicodeEdge` renders every position.

Glyph roles are named after the position they are drawn at::

    root
    |-- foo    <- "|" is the junction, "-" is the horizontal run
    |   foo2   <- "|" is the vertical continuation
    `-- bar    <- "`" is the corner, "-" is the horizontal run
        bar2
"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ruledtree.edge import EdgeConfig, PrefixPart
from ruledtree.errors import UnsupportedEdgeCombinationError

logger = logging.getLogger(__name__)


class EdgeWidth(Enum):
    NARROW = "narrow"
    BOLD = "bold"


class DashLevel(Enum):
    DOUBLE = 2
    TRIPLE = 3
    QUADRUPLE = 4


class CornerStyle(Enum):
    ANGLE = "angle"
    ROUND = "round"


class AmbiWidth(Enum):
    """
    Rendered width of East Asian ambiguous width characters.

    ``SINGLE`` suits most Western fonts, ``DOUBLE`` suits CJK fonts.
    """

    SINGLE = 1
    DOUBLE = 2


@dataclass(frozen=True)
class Solid:
    width: EdgeWidth = EdgeWidth.NARROW


@dataclass(frozen=True)
class Dashed:
    width: EdgeWidth = EdgeWidth.NARROW
    level: DashLevel = DashLevel.DOUBLE


@dataclass(frozen=True)
class Double:
    pass


LineStyle = Union[Solid, Dashed, Double]

_N = Solid(EdgeWidth.NARROW)
_B = Solid(EdgeWidth.BOLD)
_D = Double()


def _undashed(style: LineStyle) -> Union[Solid, Double]:
    # Junction characters have no dashed forms; a dash joins like a solid line.
    if isinstance(style, Dashed):
        return Solid(style.width)
    return style


# Non-last item, first line, first character.
# Keyed by (vertical_backward, vertical_forward, horizontal).
JUNCTIONS: dict[tuple[LineStyle, LineStyle, LineStyle], str] = {
    (_N, _N, _N): "\u251c",  # ├
    (_N, _N, _B): "\u251d",  # ┝
    (_N, _N, _D): "\u255e",  # ╞
    (_N, _B, _N): "\u251f",  # ┟
    (_N, _B, _B): "\u2522",  # ┢
    (_B, _N, _N): "\u251e",  # ┞
    (_B, _N, _B): "\u2521",  # ┡
    (_B, _B, _N): "\u2520",  # ┠
    (_B, _B, _B): "\u2523",  # ┣
    (_D, _D, _N): "\u255f",  # ╟
    (_D, _D, _D): "\u2560",  # ╠
}

# Last item, first line, first character.
# Keyed by (vertical_backward, horizontal, corner).
CORNERS: dict[tuple[LineStyle, LineStyle, CornerStyle], str] = {
    (_N, _N, CornerStyle.ANGLE): "\u2514",  # └
    (_N, _N, CornerStyle.ROUND): "\u2570",  # ╰
    (_N, _B, CornerStyle.ANGLE): "\u2515",  # ┕
    (_N, _D, CornerStyle.ANGLE): "\u2558",  # ╘
    (_B, _N, CornerStyle.ANGLE): "\u2516",  # ┖
    (_B, _B, CornerStyle.ANGLE): "\u2517",  # ┗
    (_D, _N, CornerStyle.ANGLE): "\u2559",  # ╙
    (_D, _D, CornerStyle.ANGLE): "\u255a",  # ╚
}

# Non-last item, succeeding line, first character.
VERTICALS: dict[LineStyle, str] = {
    Solid(EdgeWidth.NARROW): "\u2502",  # │
    Solid(EdgeWidth.BOLD): "\u2503",  # ┃
    Dashed(EdgeWidth.NARROW, DashLevel.DOUBLE): "\u254e",  # ╎
    Dashed(EdgeWidth.NARROW, DashLevel.TRIPLE): "\u2506",  # ┆
    Dashed(EdgeWidth.NARROW, DashLevel.QUADRUPLE): "\u250a",  # ┊
    Dashed(EdgeWidth.BOLD, DashLevel.DOUBLE): "\u254f",  # ╏
    Dashed(EdgeWidth.BOLD, DashLevel.TRIPLE): "\u2507",  # ┇
    Dashed(EdgeWidth.BOLD, DashLevel.QUADRUPLE): "\u250b",  # ┋
    Double(): "\u2551",  # ║
}

# Any item, first line, succeeding characters.
HORIZONTALS: dict[LineStyle, str] = {
    Solid(EdgeWidth.NARROW): "\u2500",  # ─
    Solid(EdgeWidth.BOLD): "\u2501",  # ━
    Dashed(EdgeWidth.NARROW, DashLevel.DOUBLE): "\u254c",  # ╌
    Dashed(EdgeWidth.NARROW, DashLevel.TRIPLE): "\u2504",  # ┄
    Dashed(EdgeWidth.NARROW, DashLevel.QUADRUPLE): "\u2508",  # ┈
    Dashed(EdgeWidth.BOLD, DashLevel.DOUBLE): "\u254d",  # ╍
    Dashed(EdgeWidth.BOLD, DashLevel.TRIPLE): "\u2505",  # ┅
    Dashed(EdgeWidth.BOLD, DashLevel.QUADRUPLE): "\u2509",  # ┉
    Double(): "\u2550",  # ═
}


@dataclass(frozen=True)
class UnicodeEdge(EdgeConfig):
    """
    A fully resolved Unicode edge style.

    Instances are created by :meth:`UnicodeEdgeSpec.build`, which guarantees
    that every glyph exists.
    """

    ambiwidth: AmbiWidth
    junction: str
    corner: str
    horizontal: str
    vertical: str

    def edge(self, last_child: bool, first_line: bool, part: PrefixPart) -> str:
        wide = self.ambiwidth is AmbiWidth.DOUBLE

        if first_line:
            if part is PrefixPart.PADDING:
                return " "
            head = self.corner if last_child else self.junction
            # A double width horizontal glyph already covers two columns.
            return head + self.horizontal * (1 if wide else 2)

        if last_child:
            if part is PrefixPart.PREFIX:
                return ""
            return "     " if wide else "    "

        if part is PrefixPart.PREFIX:
            return self.vertical
        return "   "


@dataclass(frozen=True)
class UnicodeEdgeSpec:
    """
    Description of a custom Unicode edge style.

    Parameters
    ----------
    ambiwidth : AmbiWidth, default=AmbiWidth.SINGLE
        Width assumed for ruled line characters.
    vertical_backward : LineStyle, default=Solid()
        Line drawn above a junction.
    vertical_forward : LineStyle, default=Solid()
        Line drawn below a junction and on continuation lines.
    horizontal : LineStyle, default=Solid()
        Line drawn between a junction and the node content.
    corner : CornerStyle, default=CornerStyle.ANGLE
        Shape of a last child's junction.
    """

    ambiwidth: AmbiWidth = AmbiWidth.SINGLE
    vertical_backward: LineStyle = Solid()
    vertical_forward: LineStyle = Solid()
    horizontal: LineStyle = Solid()
    corner: CornerStyle = CornerStyle.ANGLE

    def build(self) -> UnicodeEdge:
        """
        Resolve the glyphs of this specification.

        Returns
        -------
        UnicodeEdge
            The ready-to-render edge configuration.

        Raises
        ------
        UnsupportedEdgeCombinationError
            If Unicode has no box-drawing character for one of the glyph
            positions of this combination.
        """

        backward = _undashed(self.vertical_backward)
        forward = _undashed(self.vertical_forward)
        horizontal = _undashed(self.horizontal)

        glyphs = {
            "junction": JUNCTIONS.get((backward, forward, horizontal)),
            "corner": CORNERS.get((backward, horizontal, self.corner)),
            "horizontal": HORIZONTALS.get(self.horizontal),
            "vertical": VERTICALS.get(self.vertical_forward),
        }
        for role, glyph in glyphs.items():
            if glyph is None:
                logger.debug("No %s glyph for %r", role, self)
                raise UnsupportedEdgeCombinationError(self, role)

        return UnicodeEdge(ambiwidth=self.ambiwidth, **glyphs)


def unicode_edge(
    ambiwidth: AmbiWidth = AmbiWidth.SINGLE,
    *,
    vertical: Optional[LineStyle] = None,
    vertical_backward: Optional[LineStyle] = None,
    vertical_forward: Optional[LineStyle] = None,
    horizontal: LineStyle = Solid(),
    corner: CornerStyle = CornerStyle.ANGLE,
) -> UnicodeEdge:
    """
    Build a custom Unicode edge style in one call.

    ``vertical`` sets both vertical axes at once; ``vertical_backward`` and
    ``vertical_forward`` override it for their own axis.

    Raises
    ------
    UnsupportedEdgeCombinationError
        If the combination has no box-drawing characters.

    Examples
    --------
    >>> edge = unicode_edge(vertical=Solid(EdgeWidth.BOLD), horizontal=Solid(EdgeWidth.BOLD))
    >>> edge.edge(False, True, PrefixPart.PREFIX)
    '┣━━'
    """

    default = vertical if vertical is not None else Solid()
    spec = UnicodeEdgeSpec(
        ambiwidth=ambiwidth,
        vertical_backward=vertical_backward if vertical_backward is not None else default,
        vertical_forward=vertical_forward if vertical_forward is not None else default,
        horizontal=horizontal,
        corner=corner,
    )
    return spec.build()
