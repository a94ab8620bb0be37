import re

import pytest

from arenasolve.strings import border_lengths, count_occurrences, prefix_function, regex_match


def test_prefix_function_known_value():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("text", ["abcababcab", "aaaa", "abacaba", "xyz", "ababab"])
def test_prefix_function_values_are_borders(text):
    table = prefix_function(text)
    assert len(table) == len(text)
    for position, length in enumerate(table):
        assert length <= position
        prefix = text[: position + 1]
        assert prefix[:length] == prefix[len(prefix) - length :]


def test_prefix_function_empty():
    assert prefix_function("") == []


def test_border_lengths_example():
    assert border_lengths("abcababcab") == [2, 5]


@pytest.mark.parametrize("size", [1, 2, 5, 9])
def test_border_lengths_repeated_letter(size):
    assert border_lengths("a" * size) == list(range(1, size))


@pytest.mark.parametrize("text", ["", "abc"])
def test_border_lengths_none(text):
    assert border_lengths(text) == []


@pytest.mark.parametrize("text", ["abacaba", "aabaaabaa", "abcabcabc"])
def test_border_lengths_invariant(text):
    borders = border_lengths(text)
    assert borders == sorted(borders)
    for length in borders:
        assert 0 < length < len(text)
        assert text[:length] == text[-length:]


def test_count_occurrences_example():
    assert count_occurrences("saippuakauppias", "pp") == 2


@pytest.mark.parametrize(
    "text,pattern",
    [("aaaa", "aa"), ("abababa", "aba"), ("abc", "d"), ("ab", "abc"), ("aaaaa", "a"), ("abcabcab", "cab")],
)
def test_count_occurrences_matches_direct_scan(text, pattern):
    expected = sum(text.startswith(pattern, start) for start in range(len(text)))
    assert count_occurrences(text, pattern) == expected


def test_count_occurrences_rejects_empty_pattern():
    with pytest.raises(ValueError):
        count_occurrences("abc", "")


@pytest.mark.parametrize(
    "text,pattern",
    [
        ("aa", "a"),
        ("aa", "a*"),
        ("ab", ".*"),
        ("aab", "c*a*b"),
        ("mississippi", "mis*is*p*."),
        ("mississippi", "mis*is*ip*."),
        ("", ".*"),
        ("", "a"),
        ("", ""),
        ("abc", "a.c"),
        ("ab", ".*c"),
        ("aaa", "a*a"),
    ],
)
def test_regex_match_agrees_with_re(text, pattern):
    assert regex_match(text, pattern) == (re.fullmatch(pattern, text) is not None)


@pytest.mark.parametrize("text", ["hello", "a", "xyzzy"])
def test_regex_match_literal_pattern(text):
    assert regex_match(text, text)
    assert not regex_match(text + "q", text)