"""StringBuilder for O(n) markup accumulation.

Appends to a list and joins once, instead of repeated ``+=`` on str.
Used by the span normalizer and the chunked invoker.

Thread Safety:
StringBuilder instances are local to each call. No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """List-backed string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append('<span class="c">').append("x").append("</span>")
            >>> sb.build()
            '<span class="c">x</span>'
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string; empty strings are skipped."""
        if s:
            self._parts.append(s)
        return self

    def append_repeated(self, s: str, count: int) -> StringBuilder:
        """Append ``s`` ``count`` times (no-op for count <= 0)."""
        if s and count > 0:
            self._parts.extend([s] * count)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

