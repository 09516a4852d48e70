"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from memomark.lexer import Lexer, calc_indent_level
from memomark.tokens import LineType

MARKDOWN_CHARS = "#-*+>|`~[]()!. x\t\n123"


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_one_token_per_line(self, source: str) -> None:
        """Every source line produces exactly one token, in order."""
        tokens = list(Lexer(source).tokenize())

        assert len(tokens) == source.count("\n") + 1
        assert [token.line_index for token in tokens] == list(range(len(tokens)))

    @given(st.text(max_size=500), st.integers(min_value=0, max_value=20))
    @settings(max_examples=100)
    def test_line_limit_bounds_tokens(self, source: str, limit: int) -> None:
        """Truncation never yields more than line_limit tokens."""
        tokens = list(Lexer(source, line_limit=limit).tokenize())
        assert len(tokens) == min(limit, source.count("\n") + 1)

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_heading_levels_in_range(self, source: str) -> None:
        for token in Lexer(source).tokenize():
            if token.type is LineType.HEADING:
                assert 1 <= token.level <= 6
            else:
                assert token.level == 0

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_indent_never_negative(self, source: str) -> None:
        for token in Lexer(source).tokenize():
            assert token.indent_level >= 0


class TestSpecialCharacterHandling:
    """Test handling of special markdown characters."""

    @given(st.text(alphabet=MARKDOWN_CHARS, max_size=300))
    @settings(max_examples=200)
    def test_no_exceptions_on_special_chars(self, source: str) -> None:
        """Lexer should handle any combination of special chars without crashing."""
        tokens = list(Lexer(source).tokenize())
        assert len(tokens) >= 1

    @given(st.text(alphabet="`x\n", max_size=100))
    @settings(max_examples=100)
    def test_fences_alternate(self, source: str) -> None:
        """Fence opens and closes strictly alternate."""
        open_fence = False
        for token in Lexer(source).tokenize():
            if token.type is LineType.FENCE_OPEN:
                assert not open_fence
                open_fence = True
            elif token.type is LineType.FENCE_CLOSE:
                assert open_fence
                open_fence = False
            elif token.type is LineType.CODE_LINE:
                assert open_fence

    @given(st.text(alphabet=" \t", max_size=20))
    @settings(max_examples=100)
    def test_indent_is_monotonic_in_whitespace(self, prefix: str) -> None:
        """Adding leading whitespace never lowers the indent level."""
        assert calc_indent_level(prefix + " x") >= calc_indent_level(prefix + "x")
        assert calc_indent_level("\t" + prefix + "x") == calc_indent_level(prefix + "x") + 1
