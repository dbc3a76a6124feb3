# tests/test_lines.py
import types

import pytest

from ruledtree.lines import iter_lines


def test_empty_text_has_no_lines():
    assert list(iter_lines("")) == []


def test_single_line():
    assert list(iter_lines("foo")) == [("foo", True)]


def test_trailing_newline_yields_empty_last_line():
    assert list(iter_lines("foo\n")) == [("foo", False), ("", True)]
    assert list(iter_lines("\n")) == [("", False), ("", True)]


def test_consecutive_newlines():
    assert list(iter_lines("foo\n\nbar")) == [("foo", False), ("", False), ("bar", True)]
    assert list(iter_lines("foo\n\n")) == [("foo", False), ("", False), ("", True)]


def test_carriage_return_is_content():
    assert list(iter_lines("a\r\nb")) == [("a\r", False), ("b", True)]


def test_is_lazy():
    it = iter_lines("a\nb")
    assert isinstance(it, types.GeneratorType)
    assert next(it) == ("a", False)


@pytest.mark.parametrize(
    "text",
    ["", "\n", "\n\n", "foo", "foo\n", "foo\n\n", "\nfoo", "foo\n\nbar", "a\nb\nc\n", "  \n\t"],
)
def test_round_trip(text):
    lines = list(iter_lines(text))
    assert "\n".join(line for line, _ in lines) == text

    # Exactly the final entry is flagged as last
    assert [is_last for _, is_last in lines] == [i == len(lines) - 1 for i in range(len(lines))]

    # Dropping the empty last line, as the writer does, loses only the trailing newline
    if lines and lines[-1] == ("", True):
        lines = lines[:-1]
    rebuilt = "\n".join(line for line, _ in lines) + ("\n" if text.endswith("\n") else "")
    assert rebuilt == text
