"""Command line entry point.

Usage:
    costura test/markup --highlighter mypkg.hl:highlighter
    costura test/markup --highlighter mypkg.hl:highlighter \\
        --exceptions line_by_line_exceptions.json --language cpp -v

The highlighter is imported from a ``module:attribute`` path. If the
attribute is a class it is instantiated with no arguments.

Exit status: 0 when every check passes, 1 on any failure, 2 on usage or
setup errors that stop the run before it starts.
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from costura.config import HarnessConfig, highlight_js_exceptions
from costura.errors import CosturaError, HighlighterLoadError
from costura.harness import EquivalenceHarness
from costura.protocols import Highlighter
from costura.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def load_highlighter(target: str) -> Highlighter:
    """Import a highlighter from ``module:attribute``.

    Raises:
        HighlighterLoadError: If the path is malformed, the import fails,
            or the object has no ``highlight`` method
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise HighlighterLoadError(target, "expected 'module:attribute'")
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        # Module-level code of the highlighter can fail with anything.
        raise HighlighterLoadError(target, f"{type(exc).__name__}: {exc}") from exc

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise HighlighterLoadError(target, f"no attribute {part!r}") from exc

    if isinstance(obj, type):
        obj = obj()
    if not callable(getattr(obj, "highlight", None)):
        raise HighlighterLoadError(target, "object has no highlight() method")
    logger.debug("Loaded highlighter %r from %s", obj, target)
    return obj


def load_exceptions(path: Path) -> dict[str, list[str]]:
    """Read an exception registry from a JSON object of name lists."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise CosturaError(f"{path}: exception registry must be a JSON object")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="costura",
        description="Check line-by-line highlighting against whole-document fixtures",
    )
    parser.add_argument("root", type=Path, help="Fixture root (one directory per language)")
    parser.add_argument(
        "--highlighter",
        required=True,
        metavar="MODULE:ATTR",
        help="Highlighter to check, as an import path",
    )
    registry = parser.add_mutually_exclusive_group()
    registry.add_argument(
        "--exceptions",
        type=Path,
        metavar="FILE",
        help="JSON file mapping language to fixtures exempt from the line-by-line check",
    )
    registry.add_argument(
        "--highlight-js-exceptions",
        action="store_true",
        help="Use the exception registry of the highlight.js markup corpus",
    )
    parser.add_argument(
        "--language",
        action="append",
        dest="languages",
        metavar="LANG",
        help="Only check this language (repeatable)",
    )
    parser.add_argument(
        "--expect-suffix",
        default=".expect.txt",
        help="Expectation file suffix (default: %(default)s)",
    )
    parser.add_argument("--encoding", default="utf-8", help="Fixture encoding (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        highlighter = load_highlighter(args.highlighter)
        if args.exceptions is not None:
            exceptions = load_exceptions(args.exceptions)
        elif args.highlight_js_exceptions:
            exceptions = highlight_js_exceptions()
        else:
            exceptions = {}
        config = HarnessConfig(
            exceptions=exceptions,
            expect_suffix=args.expect_suffix,
            encoding=args.encoding,
        )
        report = EquivalenceHarness(highlighter, config).run_sync(args.root, args.languages)
    except (CosturaError, OSError, ValueError, TypeError) as exc:
        print(f"costura: error: {exc}", file=sys.stderr)
        return 2

    for verdict in report.failures:
        print(verdict.describe())
    print(report.summary())
    return 0 if report.passed else 1


__all__ = ["build_parser", "load_exceptions", "load_highlighter", "main"]
