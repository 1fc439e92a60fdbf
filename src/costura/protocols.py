"""Protocols for Costura.

Defines the contract Costura expects from an external syntax highlighter.
The highlighter is never implemented here; any object with a matching
``highlight`` method can be checked.

Call shape:
    highlight(language, code, *, ignore_illegals=False, continuation=None)
        -> object with ``.value`` (span markup) and ``.top`` (lexer state)

The ``top`` value returned after one chunk is passed back untouched as
``continuation`` for the next chunk.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

# Opaque continuation state. Costura never inspects it; it only needs to
# survive being handed back to the highlighter that produced it.
LexerState: TypeAlias = Any


@runtime_checkable
class HighlightOutput(Protocol):
    """Anything exposing the two fields Costura reads from a highlight call."""

    @property
    def value(self) -> str: ...

    @property
    def top(self) -> LexerState | None: ...


@dataclass(frozen=True, slots=True)
class HighlightResult:
    """Concrete highlight output for highlighters that need one.

    Attributes:
        value: Span-tagged markup for the highlighted code
        top: Lexer state still open after the code, or None
    """

    value: str
    top: LexerState | None = None


@runtime_checkable
class Highlighter(Protocol):
    """Protocol for highlighters under test.

    Thread Safety:
        Costura calls ``highlight`` from a single thread, in order. The
        continuation value must not be mutated by the highlighter after it
        has been returned.
    """

    def highlight(
        self,
        language: str,
        code: str,
        *,
        ignore_illegals: bool = False,
        continuation: LexerState | None = None,
    ) -> HighlightOutput:
        """Highlight ``code`` as ``language``.

        Args:
            language: Language identifier (e.g., "cpp", "javascript")
            code: Text to highlight, either a whole document or one chunk
            ignore_illegals: Keep going on illegal syntax instead of raising
            continuation: Lexer state returned by the previous chunk

        Returns:
            Result whose ``value`` is the markup and ``top`` the new state

        Contract:
            - MUST return well-nested ``<span ...>``/``</span>`` markup
            - MAY raise on lexing faults; Costura reports the fault
        """
        ...


@runtime_checkable
class AsyncHighlighter(Protocol):
    """Highlighter whose ``highlight`` suspends."""

    def highlight(
        self,
        language: str,
        code: str,
        *,
        ignore_illegals: bool = False,
        continuation: LexerState | None = None,
    ) -> Awaitable[HighlightOutput]: ...


__all__ = [
    "AsyncHighlighter",
    "HighlightOutput",
    "HighlightResult",
    "Highlighter",
    "LexerState",
]
