"""Tests for HarnessConfig and the exception registry."""

from types import MappingProxyType

import pytest

from costura.config import HarnessConfig, freeze_registry, highlight_js_exceptions


class TestHarnessConfigDataclass:
    """HarnessConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = HarnessConfig()
        assert dict(config.exceptions) == {}
        assert config.expect_suffix == ".expect.txt"
        assert config.encoding == "utf-8"

    def test_immutability(self) -> None:
        config = HarnessConfig()
        with pytest.raises(AttributeError):
            config.encoding = "latin-1"  # type: ignore[misc]

    def test_registry_values_frozen(self) -> None:
        config = HarnessConfig(exceptions={"ruby": ["heredoc"]})
        assert config.exceptions["ruby"] == frozenset({"heredoc"})
        assert isinstance(config.exceptions, MappingProxyType)

    def test_registry_copied_from_caller(self) -> None:
        source = {"ruby": ["heredoc"]}
        config = HarnessConfig(exceptions=source)
        source["ruby"].append("other")
        source["yaml"] = ["block"]
        assert config.exceptions_for("ruby") == frozenset({"heredoc"})
        assert config.exceptions_for("yaml") == frozenset()

    def test_registry_not_writable(self) -> None:
        config = HarnessConfig(exceptions={"ruby": ["heredoc"]})
        with pytest.raises(TypeError):
            config.exceptions["ruby"] = frozenset()  # type: ignore[index]

    def test_bad_suffix_rejected(self) -> None:
        with pytest.raises(ValueError, match="expect"):
            HarnessConfig(expect_suffix=".golden")

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown fixture encoding 'bogus'"):
            HarnessConfig(encoding="bogus")

    def test_encoding_alias_accepted(self) -> None:
        assert HarnessConfig(encoding="latin-1").encoding == "latin-1"


class TestExceptionLookup:
    def test_exceptions_for_unknown_language(self) -> None:
        assert HarnessConfig().exceptions_for("cpp") == frozenset()

    def test_is_exempt(self) -> None:
        config = HarnessConfig(exceptions={"yaml": ["block", "string"]})
        assert config.is_exempt("yaml", "block")
        assert not config.is_exempt("yaml", "default")
        assert not config.is_exempt("cpp", "block")

    def test_with_exceptions_returns_new_config(self) -> None:
        base = HarnessConfig(encoding="latin-1")
        updated = base.with_exceptions({"cpp": ["string-literals"]})
        assert updated.is_exempt("cpp", "string-literals")
        assert updated.encoding == "latin-1"
        assert not base.is_exempt("cpp", "string-literals")


class TestFromDict:
    def test_unknown_keys_ignored(self) -> None:
        config = HarnessConfig.from_dict({"encoding": "utf-16", "unknown_key": 1})
        assert config.encoding == "utf-16"

    def test_lists_become_frozensets(self) -> None:
        config = HarnessConfig.from_dict({"exceptions": {"yaml": ["block", "string"]}})
        assert config.exceptions_for("yaml") == frozenset({"block", "string"})

    def test_empty_dict_gives_defaults(self) -> None:
        assert HarnessConfig.from_dict({}) == HarnessConfig()


class TestFreezeRegistry:
    def test_none_is_empty(self) -> None:
        assert dict(freeze_registry(None)) == {}

    def test_string_value_rejected(self) -> None:
        with pytest.raises(TypeError, match="collection of names"):
            freeze_registry({"ruby": "heredoc"})


class TestHighlightJsPreset:
    def test_known_entries(self) -> None:
        registry = highlight_js_exceptions()
        assert registry["ruby"] == frozenset({"heredoc"})
        assert registry["javascript"] == frozenset(
            {"arrow-function", "inline-languages", "object-attr"}
        )
        assert registry["yaml"] == frozenset({"block", "string"})

    def test_usable_as_config(self) -> None:
        config = HarnessConfig(exceptions=highlight_js_exceptions())
        assert config.is_exempt("matlab", "block_comment")
        assert not config.is_exempt("python", "default")
