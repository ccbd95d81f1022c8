import pytest

from grep_lite import LiteralMatcher, PatternError, RegexMatcher, build_matcher


def test_literal_substring() -> None:
    matcher = build_matcher("needle")
    assert isinstance(matcher, LiteralMatcher)
    assert matcher.test("a needle in a haystack")
    assert matcher.test("needle")
    assert not matcher.test("Needle")
    assert not matcher.test("needl")


def test_literal_does_not_interpret_metacharacters() -> None:
    matcher = build_matcher("a.b")
    assert matcher.test("xa.by")
    assert not matcher.test("axb")


def test_empty_literal_matches_everything() -> None:
    matcher = build_matcher("")
    assert matcher.test("")
    assert matcher.test("anything")


def test_regex_is_unanchored() -> None:
    matcher = build_matcher(r"b+c", regex=True)
    assert isinstance(matcher, RegexMatcher)
    assert matcher.test("aaabbbcdd")
    assert not matcher.test("aaacdd")
    assert build_matcher(r"^start", regex=True).test("start here")
    assert not build_matcher(r"^start", regex=True).test("not start")


def test_invalid_regex_raises_pattern_error() -> None:
    with pytest.raises(PatternError) as excinfo:
        build_matcher("(unclosed", regex=True)
    assert excinfo.value.pattern == "(unclosed"
    assert "(unclosed" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_invalid_regex_is_fine_as_literal() -> None:
    matcher = build_matcher("(unclosed")
    assert matcher.test("call (unclosed paren")
