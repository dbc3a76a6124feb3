# ruledtree/lines.py

"""Splitting node content into lines."""


from __future__ import annotations

from typing import Iterator


def iter_lines(text: str) -> Iterator[tuple[str, bool]]:
    """
    Lazily split text on ``"\\n"`` and flag the last line.

    Joining the yielded lines with ``"\\n"`` gives back ``text``. A text ending
    with a newline therefore yields an empty last line, which callers use to
    know that the text ended at the start of a fresh line. An empty text yields
    nothing.

    Only ``"\\n"`` separates lines; ``"\\r"`` is kept as line content.

    Parameters
    ----------
    text : str
        Text to split.

    Yields
    ------
    tuple[str, bool]
        The line without its newline, and whether it is the last line.

    Examples
    --------
    >>> list(iter_lines("foo\\n\\nbar"))
    [('foo', False), ('', False), ('bar', True)]
    >>> list(iter_lines("foo\\n"))
    [('foo', False), ('', True)]
    >>> list(iter_lines(""))
    []
    """

    if not text:
        return

    start = 0
    while True:
        end = text.find("\n", start)
        if end < 0:
            yield text[start:], True
            return
        yield text[start:end], False
        start = end + 1
