import pytest

from algokit.cp_strings import (
    count_seniors,
    does_alice_win,
    kmp_count,
    kth_distinct,
    minimum_pushes,
    number_to_words,
)


@pytest.mark.parametrize("word", ["abcde", "xyzxyzxyzxyz", "abcdefgh", "a"])
def test_few_distinct_letters_cost_one_push_each(word):
    assert minimum_pushes(word) == len(word)


def test_more_letters_cost_more_pushes():
    word = "abcdefghijklmnopqrstuvwxyz"
    assert minimum_pushes(word) > len(word)
    assert minimum_pushes(word) == minimum_pushes(word[::-1])


def test_minimum_pushes_rejects_uppercase():
    with pytest.raises(ValueError):
        minimum_pushes("Abc")


def test_zero_in_words():
    assert number_to_words(0) == "Zero"


def test_number_in_words():
    assert number_to_words(123) == "One Hundred Twenty Three"
    assert number_to_words(1234567) == (
        "One Million Two Hundred Thirty Four Thousand Five Hundred Sixty Seven"
    )


@pytest.mark.parametrize("n", range(1, 20))
def test_small_numbers_are_one_word(n):
    assert len(number_to_words(n).split()) == 1


@pytest.mark.parametrize("n,m", [(1, 5), (12, 345), (999, 1), (40, 100)])
def test_thousands_prefix(n, m):
    assert number_to_words(n * 1000 + m) == (
        f"{number_to_words(n)} Thousand {number_to_words(m)}"
    )


@pytest.mark.parametrize("n", [1, 7, 100, 250])
def test_round_millions(n):
    assert number_to_words(n * 10**6) == f"{number_to_words(n)} Million"


def test_billion():
    assert number_to_words(10**9) == "One Billion"


def test_number_to_words_rejects_negative():
    with pytest.raises(ValueError):
        number_to_words(-1)


@pytest.mark.parametrize("s,expected", [("leetcoder", True), ("bbcd", False), ("", False), ("u", True)])
def test_does_alice_win(s, expected):
    assert does_alice_win(s) is expected


def test_kmp_counts_overlapping():
    assert kmp_count("aaaa", "aa") == 3


def test_kmp_on_lists_matches_strings():
    text = "abcabcabdabc"
    assert kmp_count(list(text), list("abc")) == kmp_count(text, "abc")


@pytest.mark.parametrize("piece,times", [("ab", 4), ("xyz", 1), ("aba", 3)])
def test_kmp_repeated_piece(piece, times):
    assert kmp_count(piece * times, piece) >= times


def test_kmp_whole_text_and_longer_pattern():
    assert kmp_count("pattern", "pattern") == 1
    assert kmp_count("ab", "abc") == 0
    assert kmp_count([1, 0, -1, 1, 0, -1], [1, 0, -1]) == 2


def test_kmp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_count("abc", "")


def test_count_seniors():
    details = ["0000000000M7522", "0000000000F9211", "0000000000F4010"]
    assert count_seniors(details) == 2


def test_age_of_sixty_is_not_senior():
    assert count_seniors(["0000000000M6000", "0000000000F6100"]) == 1


def test_count_seniors_rejects_short_details():
    with pytest.raises(ValueError):
        count_seniors(["0000M75"])


def test_kth_distinct():
    arr = ["d", "b", "c", "b", "c", "a"]
    assert kth_distinct(arr, 1) == "d"
    assert kth_distinct(arr, 2) == "a"
    assert kth_distinct(arr, 3) == ""


def test_kth_distinct_none_distinct():
    assert kth_distinct(["aaa", "aaa"], 1) == ""