"""Error construction and hierarchy tests."""

from pathlib import Path

from costura.errors import CosturaError, EquivalenceError, FixtureError, HighlighterLoadError
from costura.harness import CheckKind, Verdict

# =========================================================================
# FixtureError construction and formatting
# =========================================================================


class TestFixtureErrorFormatting:
    """Verify FixtureError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = FixtureError("fixture root is not a directory")
        assert str(err) == "fixture root is not a directory"
        assert err.language is None
        assert err.name is None
        assert err.path is None

    def test_with_language(self) -> None:
        err = FixtureError("language directory not found", language="cobol")
        assert str(err) == "cobol: language directory not found"

    def test_with_language_and_name(self) -> None:
        err = FixtureError("expectation file has no source file", language="cpp", name="lonely")
        assert str(err).startswith("cpp/lonely: ")

    def test_with_path(self) -> None:
        err = FixtureError("missing", path=Path("root/cpp/lonely.txt"))
        assert str(err).endswith(f"({Path('root/cpp/lonely.txt')})")

    def test_is_costura_error(self) -> None:
        assert isinstance(FixtureError("x"), CosturaError)


# =========================================================================
# EquivalenceError
# =========================================================================


class TestEquivalenceError:
    def test_message_is_verdict_description(self) -> None:
        verdict = Verdict("cpp", "x", CheckKind.WHOLE_DOCUMENT, passed=False, expected="a", actual="b")
        err = EquivalenceError(verdict)
        assert str(err) == verdict.describe()
        assert err.verdict is verdict

    def test_is_costura_error(self) -> None:
        verdict = Verdict("cpp", "x", CheckKind.WHOLE_DOCUMENT, passed=False)
        assert isinstance(EquivalenceError(verdict), CosturaError)


# =========================================================================
# HighlighterLoadError
# =========================================================================


class TestHighlighterLoadError:
    def test_format(self) -> None:
        err = HighlighterLoadError("pkg:hl", "no attribute 'hl'")
        assert str(err) == "Cannot load highlighter 'pkg:hl': no attribute 'hl'"
        assert err.target == "pkg:hl"

    def test_is_costura_error(self) -> None:
        assert isinstance(HighlighterLoadError("a:b", "x"), CosturaError)
