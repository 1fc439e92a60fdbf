"""Span normalization for chunked highlighter output.

A highlighter run over a whole document wraps a multi-line construct in
one span. Run one line at a time, the same highlighter closes the span at
every line end and reopens an identical span on the next line:

    whole:    <span class="hljs-comment">/* a
              b */</span>
    chunked:  <span class="hljs-comment">/* a
              </span><span class="hljs-comment">b */</span>

``normalize_spans`` rewrites the chunked form into the whole form by
eliding every ``</span>`` that is immediately followed by a reopening of
the span it closed. Applying it to both renderings makes them comparable
as plain strings.

Algorithm:
    A single left-to-right scan over span tags. Text between tags is copied
    verbatim. Closing tags are not written straight away; they are counted
    as *deferred*. When an opening tag arrives while closes are deferred,
    it is compared against the span that the deferred closes would reopen
    (``stack[-deferred]``). A match cancels one deferred close and drops
    the opening tag. Anything else, including literal text, commits the
    deferred closes first.

Limitation:
    Only tag reordering is handled. When a token's begin or end pattern
    itself matches across the line terminator, chunked output differs in
    content, not only in tag placement, and cannot be normalized. Such
    fixtures belong in the exception registry.

Thread Safety:
    Pure function. All scan state is local to one call.
"""

from __future__ import annotations

import re

from costura.stringbuilder import StringBuilder

SPAN_TAG_RE = re.compile(r"</?span[^>]*>")
CLOSE_TAG = "</span>"


def normalize_spans(markup: str) -> str:
    """Merge adjacent identical spans split at chunk boundaries.

    Args:
        markup: Span-tagged markup, well nested as a whole

    Returns:
        Markup with every close-then-reopen of the same span collapsed

    Example:
        >>> normalize_spans('<span class="c">a</span><span class="c">b</span>')
        '<span class="c">ab</span>'
        >>> normalize_spans('<span class="c">a</span>X<span class="c">b</span>')
        '<span class="c">a</span>X<span class="c">b</span>'
    """
    sb = StringBuilder()
    stack: list[str] = []
    deferred = 0
    last_end = 0

    def flush() -> None:
        nonlocal deferred
        if deferred:
            sb.append_repeated(CLOSE_TAG, deferred)
            del stack[-deferred:]
            deferred = 0

    for match in SPAN_TAG_RE.finditer(markup):
        start = match.start()
        tag = match.group()

        if start > last_end:
            flush()
            sb.append(markup[last_end:start])

        if tag.startswith("</"):
            deferred += 1
        elif 0 < deferred <= len(stack) and stack[-deferred] == tag:
            deferred -= 1
        else:
            flush()
            sb.append(tag)
            stack.append(tag)

        last_end = match.end()

    flush()
    sb.append(markup[last_end:])
    return sb.build()


def strip_spans(markup: str) -> str:
    """Remove every span tag, leaving only the highlighted text.

    Example:
        >>> strip_spans('<span class="c">a<span class="d">b</span></span>c')
        'abc'
    """
    return SPAN_TAG_RE.sub("", markup)


__all__ = ["CLOSE_TAG", "SPAN_TAG_RE", "normalize_spans", "strip_spans"]
