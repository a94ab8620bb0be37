"""String algorithms: prefix function, borders, pattern counting and regex matching."""

from __future__ import annotations


def prefix_function(text: str) -> list[int]:
    """Return, for each position, the length of the longest proper border of that prefix."""
    table = [0] * len(text)
    for position in range(1, len(text)):
        length = table[position - 1]
        while length and text[position] != text[length]:
            length = table[length - 1]
        if text[position] == text[length]:
            length += 1
        table[position] = length
    return table


def border_lengths(text: str) -> list[int]:
    """Return the lengths of all proper borders of ``text`` in increasing order."""
    if not text:
        return []
    table = prefix_function(text)
    borders = []
    length = table[-1]
    while length:
        borders.append(length)
        length = table[length - 1]
    return borders[::-1]


def count_occurrences(text: str, pattern: str) -> int:
    """Count the possibly overlapping occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_function(pattern)
    count = 0
    matched = 0
    for char in text:
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            count += 1
            matched = table[matched - 1]
    return count


def regex_match(text: str, pattern: str) -> bool:
    """Tell whether ``pattern`` with '.' and '*' matches the whole of ``text``."""
    text_len, pattern_len = len(text), len(pattern)
    # matches[i][j]: does pattern[j:] match text[i:]?
    matches = [[False] * (pattern_len + 1) for _ in range(text_len + 1)]
    matches[text_len][pattern_len] = True

    for i in range(text_len, -1, -1):
        for j in range(pattern_len - 1, -1, -1):
            first = i < text_len and pattern[j] in (text[i], ".")
            if j + 1 < pattern_len and pattern[j + 1] == "*":
                matches[i][j] = (first and matches[i + 1][j]) or matches[i][j + 2]
            else:
                matches[i][j] = first and matches[i + 1][j + 1]
    return matches[0][0]