"""Harness configuration for Costura.

All settings live on one frozen dataclass that is handed to the harness
when it is constructed. There is no module-level registry: tests and
callers inject whatever exception registry they need.

Usage:
    from costura import EquivalenceHarness, HarnessConfig

    config = HarnessConfig(exceptions={"ruby": frozenset({"heredoc"})})
    harness = EquivalenceHarness(my_highlighter, config)

    # Or from loosely typed data (JSON, YAML, ...)
    config = HarnessConfig.from_dict({"exceptions": {"ruby": ["heredoc"]}})

"""

from __future__ import annotations

import codecs
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

ExceptionRegistry = Mapping[str, frozenset[str]]

_EMPTY: frozenset[str] = frozenset()


def freeze_registry(registry: Mapping[str, Iterable[str]] | None) -> ExceptionRegistry:
    """Copy a registry into a read-only mapping of frozensets.

    Args:
        registry: Language to fixture names; any iterable of names works

    Returns:
        Read-only mapping, safe to share between harnesses

    Raises:
        TypeError: If a value is a bare string (a common JSON mistake)
    """
    if not registry:
        return MappingProxyType({})
    frozen: dict[str, frozenset[str]] = {}
    for language, names in registry.items():
        if isinstance(names, str):
            raise TypeError(
                f"Exceptions for {language!r} must be a collection of names, not a string"
            )
        frozen[language] = frozenset(names)
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True)
class HarnessConfig:
    """Immutable harness configuration.

    Attributes:
        exceptions: Fixtures per language whose line-by-line check is a
            trivial pass. The whole-document check still runs for them.
        expect_suffix: Filename suffix marking an expectation file
        encoding: Text encoding of fixture files

    """

    exceptions: ExceptionRegistry = field(default_factory=lambda: MappingProxyType({}))
    expect_suffix: str = ".expect.txt"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        object.__setattr__(self, "exceptions", freeze_registry(self.exceptions))
        if ".expect" not in self.expect_suffix:
            raise ValueError(
                f"expect_suffix must contain '.expect', got {self.expect_suffix!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown fixture encoding {self.encoding!r}") from exc

    def exceptions_for(self, language: str) -> frozenset[str]:
        """Fixture names exempt from the line-by-line check for ``language``."""
        return self.exceptions.get(language, _EMPTY)

    def is_exempt(self, language: str, name: str) -> bool:
        """Whether ``language``/``name`` skips the line-by-line check."""
        return name in self.exceptions_for(language)

    def with_exceptions(self, registry: Mapping[str, Iterable[str]]) -> HarnessConfig:
        """Return a copy using ``registry`` as the exception registry."""
        return replace(self, exceptions=freeze_registry(registry))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> HarnessConfig:
        """Create HarnessConfig from a dictionary.

        Unknown keys are ignored, so a larger settings file can be passed
        straight through.

        Example:
            >>> config = HarnessConfig.from_dict({
            ...     "exceptions": {"yaml": ["block", "string"]},
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.exceptions_for("yaml"))
            ['block', 'string']

        """
        valid_fields = {f for f in cls.__dataclass_fields__}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Fixtures of the highlight.js markup corpus whose begin or end matchers
# consume a newline, so chunked output cannot be normalized to match.
_HIGHLIGHT_JS_EXCEPTIONS: dict[str, tuple[str, ...]] = {
    "cpp": ("string-literals",),
    "crystal": ("literals", "operators"),
    "cs": ("functions", "titles"),
    "dart": ("comment-markdown",),
    "dockerfile": ("default",),
    "http": ("default",),
    "javascript": ("arrow-function", "inline-languages", "object-attr"),
    "lisp": ("mec",),
    "matlab": ("block_comment",),
    "properties": ("syntax",),
    "reasonml": ("functions", "modules"),
    "ruby": ("heredoc",),
    "rust": ("strings",),
    "typescript": ("inline-languages",),
    "vim": ("strings-comments",),
    "yaml": ("block", "string"),
}


def highlight_js_exceptions() -> ExceptionRegistry:
    """Exception registry for the highlight.js markup fixture corpus."""
    return freeze_registry(_HIGHLIGHT_JS_EXCEPTIONS)


__all__ = [
    "ExceptionRegistry",
    "HarnessConfig",
    "freeze_registry",
    "highlight_js_exceptions",
]
