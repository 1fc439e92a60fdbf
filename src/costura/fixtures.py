"""Fixture discovery and loading.

Corpus layout::

    root/
        cpp/
            comments.txt            source
            comments.expect.txt     expected whole-document markup
        ruby/
            heredoc.txt
            heredoc.expect.txt

Languages are the immediate subdirectories of the root. Fixtures are
found through their expectation files; the source path is the expectation
path with ``.expect`` removed. An expectation without a source is a setup
fault: ``discover_fixtures`` raises ``FixtureError`` for it, while
``scan_fixtures`` collects one error per orphan and keeps the valid pairs.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from costura.config import HarnessConfig
from costura.errors import FixtureError
from costura.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FixturePair:
    """One golden test case.

    Attributes:
        language: Language identifier (the directory name)
        name: Fixture base name, expectation suffix stripped
        source_path: File holding the raw source
        expect_path: File holding the expected whole-document markup
    """

    language: str
    name: str
    source_path: Path
    expect_path: Path

    @property
    def test_id(self) -> str:
        """Stable identifier, ``language/name``."""
        return f"{self.language}/{self.name}"


@dataclass(frozen=True, slots=True)
class FixtureText:
    """Contents of a fixture pair, read together."""

    source: str
    expected: str


def _require_root(root: Path) -> Path:
    root = Path(root)
    if not root.is_dir():
        raise FixtureError("fixture root is not a directory", path=root)
    return root


def discover_languages(root: Path | str) -> list[str]:
    """List language directories under ``root``, sorted by name.

    Raises:
        FixtureError: If ``root`` is not a directory
    """
    root = _require_root(Path(root))
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )


def source_path_for(expect_path: Path, config: HarnessConfig) -> Path:
    """Derive the source path paired with an expectation file."""
    source_suffix = config.expect_suffix.replace(".expect", "", 1)
    name = expect_path.name[: -len(config.expect_suffix)]
    return expect_path.with_name(name + source_suffix)


def scan_fixtures(
    root: Path | str,
    language: str,
    config: HarnessConfig | None = None,
) -> tuple[list[FixturePair], list[FixtureError]]:
    """Find fixture pairs for ``language`` and collect orphaned expectations.

    Unlike ``discover_fixtures`` this never stops at an orphan: every valid
    pair is returned alongside one ``FixtureError`` per expectation file
    that has no source.

    Returns:
        (pairs, orphans), both in name order

    Raises:
        FixtureError: If the language directory is missing
    """
    config = config or HarnessConfig()
    language_dir = _require_root(Path(root)) / language
    if not language_dir.is_dir():
        raise FixtureError("language directory not found", language=language, path=language_dir)

    pairs: list[FixturePair] = []
    orphans: list[FixtureError] = []
    for expect_path in sorted(language_dir.glob(f"*{config.expect_suffix}")):
        name = expect_path.name[: -len(config.expect_suffix)]
        source_path = source_path_for(expect_path, config)
        if not source_path.is_file():
            orphans.append(
                FixtureError(
                    "expectation file has no source file",
                    language=language,
                    name=name,
                    path=source_path,
                )
            )
            continue
        pairs.append(FixturePair(language, name, source_path, expect_path))

    logger.debug("Found %d fixture(s), %d orphan(s) for %s", len(pairs), len(orphans), language)
    return pairs, orphans


def discover_fixtures(
    root: Path | str,
    language: str,
    config: HarnessConfig | None = None,
) -> list[FixturePair]:
    """Find every fixture pair for ``language``, sorted by name.

    Args:
        root: Fixture root directory
        language: Language directory name under ``root``
        config: Supplies the expectation suffix (defaults apply if None)

    Returns:
        Fixture pairs in name order

    Raises:
        FixtureError: If the language directory is missing or an
            expectation file has no source
    """
    pairs, orphans = scan_fixtures(root, language, config)
    if orphans:
        raise orphans[0]
    return pairs


def fixture_cases(
    root: Path | str,
    config: HarnessConfig | None = None,
    languages: Sequence[str] | None = None,
) -> Iterator[FixturePair]:
    """Yield fixture pairs across languages for test registration.

    Meant for ``pytest.mark.parametrize``::

        @pytest.mark.parametrize(
            "pair", list(fixture_cases(ROOT)), ids=lambda p: p.test_id
        )

    Raises:
        FixtureError: On the first misconfigured language
    """
    for language in languages if languages is not None else discover_languages(root):
        yield from discover_fixtures(root, language, config)


async def _read_text(path: Path, encoding: str) -> str:
    async with aiofiles.open(path, "r", encoding=encoding, newline="") as f:
        return await f.read()


async def read_fixture(pair: FixturePair, encoding: str = "utf-8") -> FixtureText:
    """Read source and expectation concurrently.

    Both reads are started together and awaited as one. Each read is
    collected even when the other fails; the first error is then raised.
    """
    source, expected = await asyncio.gather(
        _read_text(pair.source_path, encoding),
        _read_text(pair.expect_path, encoding),
        return_exceptions=True,
    )
    for result in (source, expected):
        if isinstance(result, BaseException):
            raise result
    return FixtureText(source=source, expected=expected)


__all__ = [
    "FixturePair",
    "FixtureText",
    "discover_fixtures",
    "discover_languages",
    "fixture_cases",
    "read_fixture",
    "scan_fixtures",
    "source_path_for",
]
