"""Tests for costura.lines — line segmentation."""

from hypothesis import given, settings
from hypothesis import strategies as st

from costura.lines import LineFragments, split_lines


class TestSplitLines:
    """Example-based segmentation behavior."""

    def test_terminated_text(self) -> None:
        assert list(split_lines("a\nb\n")) == ["a\n", "b\n"]

    def test_unterminated_last_line(self) -> None:
        assert list(split_lines("a\nb")) == ["a\n", "b"]

    def test_empty_string_yields_nothing(self) -> None:
        assert list(split_lines("")) == []

    def test_single_newline(self) -> None:
        assert list(split_lines("\n")) == ["\n"]

    def test_blank_lines_kept(self) -> None:
        assert list(split_lines("a\n\n\nb")) == ["a\n", "\n", "\n", "b"]

    def test_no_newline_at_all(self) -> None:
        assert list(split_lines("hello")) == ["hello"]

    def test_carriage_return_stays_in_fragment(self) -> None:
        assert list(split_lines("a\r\nb\r\n")) == ["a\r\n", "b\r\n"]

    def test_restartable(self) -> None:
        fragments = split_lines("one\ntwo\n")
        assert list(fragments) == list(fragments)

    def test_lazy(self) -> None:
        """Iteration can stop early without splitting the rest."""
        fragments = iter(split_lines("x\n" * 10_000))
        assert next(fragments) == "x\n"

    def test_len(self) -> None:
        assert len(split_lines("")) == 0
        assert len(split_lines("a")) == 1
        assert len(split_lines("a\n")) == 1
        assert len(split_lines("a\nb")) == 2
        assert len(split_lines("\n\n")) == 2

    def test_text_property(self) -> None:
        assert isinstance(split_lines("abc"), LineFragments)
        assert split_lines("abc").text == "abc"


class TestSegmentationProperties:
    """Properties that hold for any input."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_round_trip(self, text: str) -> None:
        """Joining the fragments reproduces the text exactly."""
        assert "".join(split_lines(text)) == text

    @given(st.text(alphabet="ab\n\r ", max_size=200))
    @settings(max_examples=200)
    def test_only_last_fragment_may_lack_terminator(self, text: str) -> None:
        fragments = list(split_lines(text))
        for fragment in fragments[:-1]:
            assert fragment.endswith("\n")
            assert "\n" not in fragment[:-1]

    @given(st.text(alphabet="ab\n", max_size=200))
    @settings(max_examples=200)
    def test_no_empty_fragments(self, text: str) -> None:
        assert all(fragment for fragment in split_lines(text))

    @given(st.text(alphabet="ab\n", max_size=200))
    @settings(max_examples=100)
    def test_len_matches_iteration(self, text: str) -> None:
        fragments = split_lines(text)
        assert len(fragments) == len(list(fragments))
