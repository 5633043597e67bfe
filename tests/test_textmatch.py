from itertools import product

import pytest

from algosolve.textmatch import (
    check_markup,
    count_occurrences,
    kmp_search,
    largest_after_removal,
    matches_signal,
    min_mismatch,
    submarine_verdict,
    wildcard_matches,
)


@pytest.mark.parametrize(
    "signal, expected",
    [("0101", True), ("1001", True), ("100001111", True), ("10", False), ("0110", False), ("", False)],
)
def test_matches_signal(signal, expected):
    assert matches_signal(signal) is expected


def test_submarine_verdict_values():
    assert submarine_verdict("100000000001101") == "SUBMARINE"
    assert submarine_verdict("0110") == "NOISE"


def test_submarine_agrees_with_signal():
    for length in range(1, 9):
        for bits in product("01", repeat=length):
            signal = "".join(bits)
            expected = "SUBMARINE" if matches_signal(signal) else "NOISE"
            assert submarine_verdict(signal) == expected


def test_min_mismatch_found_substring():
    assert min_mismatch("abc", "xxabcxx") == 0


def test_min_mismatch_equal_length():
    assert min_mismatch("abc", "abd") == 1


def test_min_mismatch_sample():
    assert min_mismatch("adaabc", "aababbc") == 2


def test_min_mismatch_rejects_longer_first():
    with pytest.raises(ValueError):
        min_mismatch("abcd", "abc")


def test_count_occurrences_single_chars():
    assert count_occurrences("a" * 7, "a") == 7


def test_count_occurrences_not_more_than_overlapping():
    document = "ababababa"
    assert count_occurrences(document, "aba") <= len(kmp_search(document, "aba"))


def test_count_occurrences_empty_target():
    with pytest.raises(ValueError):
        count_occurrences("abc", "")


def test_kmp_positions_are_matches():
    text = "ABC ABCDAB ABCDABCDABDE"
    pattern = "ABCDAB"
    positions = kmp_search(text, pattern)
    assert positions
    for p in positions:
        assert text[p - 1:p - 1 + len(pattern)] == pattern


def test_kmp_overlapping():
    assert kmp_search("aaaa", "aa") == [1, 2, 3]


def test_kmp_no_match():
    assert kmp_search("abc", "d") == []


def test_kmp_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("<a>text</a>", True),
        ("<br/>", True),
        ("&lt;&gt;&amp;&x3f;", True),
        ("<AB>", False),
        ("<a><b></a></b>", False),
        ("a & b", False),
        ("<a>", False),
    ],
)
def test_check_markup(line, expected):
    assert check_markup(line) is expected


@pytest.mark.parametrize(
    "name, expected",
    [("abcd", True), ("ad", True), ("abc", False), ("xbcd", False)],
)
def test_wildcard_matches(name, expected):
    assert wildcard_matches("a*d", name) is expected


def test_largest_after_removal_samples():
    assert largest_after_removal("1924", 2) == "94"
    assert largest_after_removal("4177252841", 4) == "775841"


def test_largest_after_removal_length_and_subsequence():
    digits = "31415926535"
    result = largest_after_removal(digits, 4)
    assert len(result) == len(digits) - 4
    it = iter(digits)
    assert all(ch in it for ch in result)


def test_largest_after_removal_bad_k():
    with pytest.raises(ValueError):
        largest_after_removal("12", 3)