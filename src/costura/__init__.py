"""
Costura — Line-by-line highlighting equivalence checks

Verifies that a syntax highlighter fed one line at a time, carrying its
lexer state between calls, produces the same markup as a single call over
the whole document. Multi-line tokens that the chunked run splits into
one span per line are merged back before comparison.

Quick Start:
    >>> from costura import normalize_spans, split_lines
    >>> list(split_lines("a\\nb"))
    ['a\\n', 'b']
    >>> normalize_spans('<span class="c">a\\n</span><span class="c">b</span>')
    '<span class="c">a\\nb</span>'

Running a fixture corpus:
    from costura import EquivalenceHarness, HarnessConfig

    harness = EquivalenceHarness(my_highlighter, HarnessConfig())
    report = harness.run_sync("test/markup")
    print(report.summary())

Installation:
    pip install costura
"""

from costura.config import (
    ExceptionRegistry,
    HarnessConfig,
    freeze_registry,
    highlight_js_exceptions,
)
from costura.errors import (
    CosturaError,
    EquivalenceError,
    FixtureError,
    HighlighterLoadError,
)
from costura.fixtures import (
    FixturePair,
    FixtureText,
    discover_fixtures,
    discover_languages,
    fixture_cases,
    read_fixture,
    scan_fixtures,
)
from costura.harness import CheckKind, EquivalenceHarness, Report, Verdict
from costura.invoker import (
    highlight_chunked,
    highlight_chunked_async,
    highlight_document,
    highlight_document_async,
)
from costura.lines import LineFragments, split_lines
from costura.normalize import normalize_spans, strip_spans
from costura.protocols import (
    AsyncHighlighter,
    HighlightOutput,
    HighlightResult,
    Highlighter,
    LexerState,
)

__version__ = "0.1.0"

__all__ = [
    # Segmentation + invocation
    "LineFragments",
    "split_lines",
    "highlight_chunked",
    "highlight_chunked_async",
    "highlight_document",
    "highlight_document_async",
    # Normalization
    "normalize_spans",
    "strip_spans",
    # Highlighter protocol
    "AsyncHighlighter",
    "HighlightOutput",
    "HighlightResult",
    "Highlighter",
    "LexerState",
    # Fixtures
    "FixturePair",
    "FixtureText",
    "discover_fixtures",
    "discover_languages",
    "fixture_cases",
    "read_fixture",
    "scan_fixtures",
    # Harness
    "CheckKind",
    "EquivalenceHarness",
    "Report",
    "Verdict",
    # Configuration
    "ExceptionRegistry",
    "HarnessConfig",
    "freeze_registry",
    "highlight_js_exceptions",
    # Errors
    "CosturaError",
    "EquivalenceError",
    "FixtureError",
    "HighlighterLoadError",
]
