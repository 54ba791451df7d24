import pytest

from filehunt.matchers import Matcher, RegexMatcher, SimpleMatcher, create_matcher


def test_simple_matches_ignores_case():
    matcher = SimpleMatcher("Hello")
    assert matcher.matches("say HELLO there") is True
    assert matcher.matches("goodbye") is False


def test_simple_find_matches_reports_lines_and_positions():
    text = "first\nHello world\nnothing\nsay hello again"
    found = SimpleMatcher("hello").find_matches(text)
    assert [number for number, _, _ in found] == [2, 4]
    for number, line, (start, end) in found:
        assert line == text.split("\n")[number - 1]
        assert line[start:end].lower() == "hello"


def test_simple_find_matches_only_first_hit_per_line():
    found = SimpleMatcher("foo").find_matches("foo and foo")
    assert len(found) == 1
    assert found[0][2][0] == 0


def test_lines_strip_carriage_return_and_trailing_newline():
    found = SimpleMatcher("b").find_matches("a\r\nb\r\n")
    assert found == [(2, "b", (0, 1))]


def test_empty_content_has_no_matches():
    assert SimpleMatcher("x").find_matches("") == []
    assert RegexMatcher("x").find_matches("") == []


def test_regex_finds_every_hit_on_a_line():
    text = "a1 b22\nnone\n333"
    found = RegexMatcher(r"\d+").find_matches(text)
    assert [number for number, _, _ in found] == [1, 1, 3]
    assert [line[start:end] for _, line, (start, end) in found] == ["1", "22", "333"]


def test_regex_matches_whole_content():
    matcher = RegexMatcher(r"^rep.*\.txt$")
    assert matcher.matches("report.txt") is True
    assert matcher.matches("notes.md") is False


def test_regex_is_case_sensitive():
    assert RegexMatcher("abc").matches("ABC") is False


def test_invalid_regex_raises_value_error():
    with pytest.raises(ValueError):
        RegexMatcher("(unclosed")


def test_create_matcher_chooses_kind():
    assert isinstance(create_matcher("a+", True), RegexMatcher)
    assert isinstance(create_matcher("a+", False), SimpleMatcher)
    plain = create_matcher("a+", False)
    assert plain.matches("xa+y") is True
    assert plain.matches("aaa") is False


def test_matcher_is_abstract():
    with pytest.raises(TypeError):
        Matcher()