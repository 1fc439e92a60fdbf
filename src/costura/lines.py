"""Line segmentation for chunked highlighting.

Splits source text into the fragments an editor would feed a highlighter
one at a time. Each fragment keeps its trailing ``\\n`` so that joining the
fragments gives back the original text exactly.

    >>> list(split_lines("a\\nb\\n"))
    ['a\\n', 'b\\n']
    >>> list(split_lines("a\\nb"))
    ['a\\n', 'b']
    >>> list(split_lines(""))
    []

Only ``\\n`` is a terminator. A ``\\r`` before it stays part of the fragment.
"""

from __future__ import annotations

from collections.abc import Iterator

LINE_TERMINATOR = "\n"


class LineFragments:
    """Restartable, lazy sequence of line fragments.

    Iterating twice yields the same fragments; nothing is split until
    iteration starts.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        """The source text being segmented."""
        return self._text

    def __iter__(self) -> Iterator[str]:
        text = self._text
        start = 0
        end = len(text)
        while start < end:
            newline = text.find(LINE_TERMINATOR, start)
            if newline == -1:
                yield text[start:]
                return
            yield text[start : newline + 1]
            start = newline + 1

    def __len__(self) -> int:
        text = self._text
        if not text:
            return 0
        count = text.count(LINE_TERMINATOR)
        if not text.endswith(LINE_TERMINATOR):
            count += 1
        return count

    def __repr__(self) -> str:
        return f"LineFragments({len(self)} fragments)"


def split_lines(text: str) -> LineFragments:
    """Segment ``text`` into newline-terminated fragments.

    Args:
        text: Full source text

    Returns:
        LineFragments that can be iterated any number of times
    """
    return LineFragments(text)


__all__ = ["LINE_TERMINATOR", "LineFragments", "split_lines"]
