"""Exception classes for Costura.

Equivalence mismatches are normally reported as failing verdicts rather
than raised. The exceptions here cover setup faults and the opt-in
``Verdict.raise_for_failure`` path used by test runners.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from costura.harness import Verdict


class CosturaError(Exception):
    """Base exception for all Costura errors.

    Subclass this for specific error categories.
    """

    pass


class FixtureError(CosturaError):
    """Fixture corpus is misconfigured.

    Raised when an expectation file has no paired source file, or when the
    fixture root does not exist. These are setup faults, distinct from
    equivalence mismatches.
    """

    def __init__(
        self,
        message: str,
        *,
        language: str | None = None,
        name: str | None = None,
        path: Path | None = None,
    ) -> None:
        """Initialize fixture error.

        Args:
            message: Description of the fault
            language: Language directory the fault was found in (optional)
            name: Fixture base name (optional)
            path: Offending path (optional)
        """
        self.message = message
        self.language = language
        self.name = name
        self.path = path

        prefix = ""
        if language is not None:
            prefix = language if name is None else f"{language}/{name}"
            prefix += ": "
        suffix = f" ({path})" if path is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")


class EquivalenceError(CosturaError):
    """A check did not pass.

    Carries the failing verdict so both compared renderings stay available
    for diagnostics.
    """

    def __init__(self, verdict: Verdict) -> None:
        self.verdict = verdict
        super().__init__(verdict.describe())


class HighlighterLoadError(CosturaError):
    """A highlighter could not be imported from a ``module:attribute`` path."""

    def __init__(self, target: str, message: str) -> None:
        self.target = target
        super().__init__(f"Cannot load highlighter {target!r}: {message}")
