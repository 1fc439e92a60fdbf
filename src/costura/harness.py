"""Equivalence harness.

Runs every fixture of a corpus through two independent checks:

1. Whole document: highlight the full source once and compare with the
   expectation, both trimmed.
2. Line by line: highlight the source one line at a time, threading the
   lexer state, then normalize spans on both sides and compare trimmed.
   Fixtures listed in the exception registry pass this check without
   running it.

Each check yields one ``Verdict``. Failures never abort the run: an I/O
error, a highlighter fault or a mismatch is recorded on that fixture's
verdicts and the harness moves on. Each orphaned expectation file is
reported as its own ``SETUP`` verdict; its sibling fixtures still run.

Usage:
    harness = EquivalenceHarness(my_highlighter, HarnessConfig())
    report = harness.run_sync("test/markup")
    for verdict in report.failures:
        print(verdict.describe())

Concurrency:
    Single-threaded asyncio. The two files of a fixture are read
    concurrently; fixtures and languages are processed in order.
"""

from __future__ import annotations

import asyncio
import difflib
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from costura.config import HarnessConfig
from costura.errors import EquivalenceError, FixtureError
from costura.fixtures import (
    FixturePair,
    FixtureText,
    discover_languages,
    read_fixture,
    scan_fixtures,
)
from costura.invoker import highlight_chunked_async, highlight_document_async
from costura.lines import split_lines
from costura.normalize import normalize_spans
from costura.utils.logger import get_logger

if TYPE_CHECKING:
    from costura.protocols import AsyncHighlighter, Highlighter

logger = get_logger(__name__)


class CheckKind(Enum):
    """Kinds of verdict the harness produces."""

    WHOLE_DOCUMENT = "whole document"
    LINE_BY_LINE = "line by line"
    SETUP = "setup"


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of one check on one fixture.

    Attributes:
        language: Language identifier
        name: Fixture base name (None for a language-wide setup fault)
        kind: Which check produced this verdict
        passed: True if the check passed or was skipped
        skipped: True if the fixture is exempt from this check
        expected: Compared expectation text, when a comparison ran
        actual: Compared highlighter output, when a comparison ran
        error: Exception that prevented the check, if any
    """

    language: str
    name: str | None
    kind: CheckKind
    passed: bool
    skipped: bool = False
    expected: str | None = None
    actual: str | None = None
    error: BaseException | None = None

    @property
    def test_id(self) -> str:
        if self.name is None:
            return self.language
        return f"{self.language}/{self.name}"

    def describe(self) -> str:
        """Human-readable summary; includes a diff for mismatches."""
        header = f"{self.test_id} [{self.kind.value}]"
        if self.passed:
            return f"{header}: skipped" if self.skipped else f"{header}: ok"
        if self.error is not None:
            return f"{header}: {type(self.error).__name__}: {self.error}"
        diff = difflib.unified_diff(
            (self.expected or "").splitlines(keepends=True),
            (self.actual or "").splitlines(keepends=True),
            fromfile="expected",
            tofile="actual",
        )
        return f"{header}: output differs\n{''.join(diff)}"

    def raise_for_failure(self) -> None:
        """Raise ``EquivalenceError`` if this verdict is a failure."""
        if not self.passed:
            raise EquivalenceError(self)


@dataclass(slots=True)
class Report:
    """All verdicts from one harness run, in execution order."""

    verdicts: list[Verdict] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(v.passed for v in self.verdicts)

    @property
    def failures(self) -> list[Verdict]:
        return [v for v in self.verdicts if not v.passed]

    @property
    def skipped(self) -> list[Verdict]:
        return [v for v in self.verdicts if v.skipped]

    def summary(self) -> str:
        total = len(self.verdicts)
        failed = len(self.failures)
        skipped = len(self.skipped)
        return f"{total - failed} passed, {failed} failed, {skipped} skipped ({total} checks)"

    def __iter__(self) -> Iterator[Verdict]:
        return iter(self.verdicts)

    def __len__(self) -> int:
        return len(self.verdicts)


class EquivalenceHarness:
    """Checks a highlighter's chunked output against whole-document fixtures.

    Args:
        highlighter: Highlighter under test; ``highlight`` may be sync or
            return an awaitable
        config: Harness configuration, including the exception registry

    Thread Safety:
        The harness holds no mutable state. One instance may be reused
        across runs.
    """

    __slots__ = ("_highlighter", "_config")

    def __init__(
        self,
        highlighter: Highlighter | AsyncHighlighter,
        config: HarnessConfig | None = None,
    ) -> None:
        self._highlighter = highlighter
        self._config = config or HarnessConfig()

    @property
    def config(self) -> HarnessConfig:
        return self._config

    async def check_document(self, pair: FixturePair, text: FixtureText) -> Verdict:
        """Highlight the whole source once and compare with the expectation."""
        kind = CheckKind.WHOLE_DOCUMENT
        try:
            actual = await highlight_document_async(self._highlighter, pair.language, text.source)
        except Exception as exc:
            logger.debug("Highlighter failed on %s (%s)", pair.test_id, kind.value, exc_info=True)
            return Verdict(pair.language, pair.name, kind, passed=False, error=exc)

        actual = actual.strip()
        expected = text.expected.strip()
        return Verdict(
            pair.language,
            pair.name,
            kind,
            passed=actual == expected,
            expected=expected,
            actual=actual,
        )

    async def check_line_by_line(self, pair: FixturePair, text: FixtureText) -> Verdict:
        """Highlight line by line and compare after span normalization."""
        kind = CheckKind.LINE_BY_LINE
        if self._config.is_exempt(pair.language, pair.name):
            return self._exempt(pair)
        try:
            actual = await highlight_chunked_async(
                self._highlighter, pair.language, split_lines(text.source)
            )
        except Exception as exc:
            logger.debug("Highlighter failed on %s (%s)", pair.test_id, kind.value, exc_info=True)
            return Verdict(pair.language, pair.name, kind, passed=False, error=exc)

        actual = normalize_spans(actual).strip()
        expected = normalize_spans(text.expected).strip()
        return Verdict(
            pair.language,
            pair.name,
            kind,
            passed=actual == expected,
            expected=expected,
            actual=actual,
        )

    def _exempt(self, pair: FixturePair) -> Verdict:
        logger.debug("Skipping line-by-line check for exempt fixture %s", pair.test_id)
        return Verdict(
            pair.language, pair.name, CheckKind.LINE_BY_LINE, passed=True, skipped=True
        )

    async def run_fixture(self, pair: FixturePair) -> list[Verdict]:
        """Run both checks on one fixture pair.

        Returns:
            ``[whole_document, line_by_line]`` verdicts
        """
        try:
            text = await read_fixture(pair, self._config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read fixture %s", pair.test_id, exc_info=True)
            document = Verdict(
                pair.language, pair.name, CheckKind.WHOLE_DOCUMENT, passed=False, error=exc
            )
            if self._config.is_exempt(pair.language, pair.name):
                return [document, self._exempt(pair)]
            line_by_line = Verdict(
                pair.language, pair.name, CheckKind.LINE_BY_LINE, passed=False, error=exc
            )
            return [document, line_by_line]

        return [
            await self.check_document(pair, text),
            await self.check_line_by_line(pair, text),
        ]

    async def run_language(self, root: Path | str, language: str) -> list[Verdict]:
        """Run every fixture of one language directory.

        Each orphaned expectation file yields its own ``SETUP`` verdict;
        the valid fixtures next to it still run.
        """
        try:
            pairs, orphans = scan_fixtures(root, language, self._config)
        except FixtureError as exc:
            logger.warning("Fixture setup error: %s", exc)
            return [Verdict(language, exc.name, CheckKind.SETUP, passed=False, error=exc)]

        verdicts: list[Verdict] = []
        for orphan in orphans:
            logger.warning("Fixture setup error: %s", orphan)
            verdicts.append(Verdict(language, orphan.name, CheckKind.SETUP, passed=False, error=orphan))
        for pair in pairs:
            verdicts.extend(await self.run_fixture(pair))

        failed = sum(1 for v in verdicts if not v.passed)
        logger.info("%s: %d fixture(s), %d failing check(s)", language, len(pairs), failed)
        return verdicts

    async def run(
        self,
        root: Path | str,
        languages: Sequence[str] | None = None,
    ) -> Report:
        """Run the whole corpus, or only ``languages`` when given.

        Raises:
            FixtureError: If ``root`` is not a directory
        """
        if languages is None:
            languages = discover_languages(root)
        report = Report()
        for language in languages:
            report.verdicts.extend(await self.run_language(root, language))
        logger.info("Run complete: %s", report.summary())
        return report

    def run_sync(self, root: Path | str, languages: Sequence[str] | None = None) -> Report:
        """Blocking wrapper around ``run`` for callers without a loop."""
        return asyncio.run(self.run(root, languages))


__all__ = ["CheckKind", "EquivalenceHarness", "Report", "Verdict"]
