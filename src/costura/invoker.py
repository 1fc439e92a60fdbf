"""Drive a highlighter over a document, whole or one chunk at a time.

The chunked path mimics an editor that re-highlights line by line: each
call receives the lexer state the previous call returned, and the markup
of all calls is concatenated in order.

Highlighter faults are not caught here. Whatever the highlighter raises
reaches the caller unchanged.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from typing import TYPE_CHECKING

from costura.stringbuilder import StringBuilder
from costura.utils.logger import get_logger

if TYPE_CHECKING:
    from costura.protocols import AsyncHighlighter, Highlighter, LexerState

logger = get_logger(__name__)


def highlight_document(highlighter: Highlighter, language: str, source: str) -> str:
    """Highlight ``source`` in a single call and return the markup."""
    result = highlighter.highlight(language, source, ignore_illegals=False, continuation=None)
    return result.value


def highlight_chunked(
    highlighter: Highlighter,
    language: str,
    fragments: Iterable[str],
) -> str:
    """Highlight fragments in order, threading the continuation state.

    Args:
        highlighter: Highlighter under test
        language: Language identifier
        fragments: Chunks to feed, usually from ``split_lines``

    Returns:
        Concatenated markup of every call
    """
    sb = StringBuilder()
    state: LexerState | None = None
    count = 0
    for fragment in fragments:
        result = highlighter.highlight(
            language, fragment, ignore_illegals=False, continuation=state
        )
        sb.append(result.value)
        state = result.top
        count += 1
    logger.debug("Highlighted %d %s chunk(s)", count, language)
    return sb.build()


async def highlight_document_async(
    highlighter: Highlighter | AsyncHighlighter,
    language: str,
    source: str,
) -> str:
    """Like ``highlight_document`` but awaits highlighters that suspend."""
    result = highlighter.highlight(language, source, ignore_illegals=False, continuation=None)
    if inspect.isawaitable(result):
        result = await result
    return result.value


async def highlight_chunked_async(
    highlighter: Highlighter | AsyncHighlighter,
    language: str,
    fragments: Iterable[str],
) -> str:
    """Like ``highlight_chunked`` but awaits highlighters that suspend.

    Synchronous highlighters are accepted too; their results are used as
    returned.
    """
    sb = StringBuilder()
    state: LexerState | None = None
    for fragment in fragments:
        result = highlighter.highlight(
            language, fragment, ignore_illegals=False, continuation=state
        )
        if inspect.isawaitable(result):
            result = await result
        sb.append(result.value)
        state = result.top
    return sb.build()


__all__ = [
    "highlight_chunked",
    "highlight_chunked_async",
    "highlight_document",
    "highlight_document_async",
]
