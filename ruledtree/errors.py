# ruledtree/errors.py

"""
Exceptions raised by the tree printer.

All public errors derive from :class:`TreePrintError`. Internal state machine
violations are reported with plain assertions instead, since they can only be
caused by a bug in this package.
"""


from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ruledtree.unicode import UnicodeEdgeSpec


class TreePrintError(Exception):
    """Base class for every error raised by ``ruledtree``."""


class ExtraCloseError(TreePrintError):
    """A node was closed while no node was open."""

    def __init__(self, message: str = "Attempt to close a node but there are no open nodes") -> None:
        super().__init__(message)


class SinkWriteError(TreePrintError):
    """
    The text sink failed to accept a write.

    The original exception raised by the sink is available as ``__cause__``.
    """


class UnsupportedEdgeCombinationError(TreePrintError, ValueError):
    """
    A Unicode edge specification has no matching box-drawing character.

    Parameters
    ----------
    spec : UnicodeEdgeSpec
        The specification that could not be built.
    role : str
        Name of the glyph position that has no character, e.g. ``"junction"``.
    """

    def __init__(self, spec: UnicodeEdgeSpec, role: str) -> None:
        self.spec = spec
        self.role = role
        super().__init__(spec, role)

    def __str__(self) -> str:
        return f"No box-drawing character for the {self.role} of {self.spec!r}"
