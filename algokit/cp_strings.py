"""String and counting puzzles: keypad pushes, numbers in words, a vowel game,
KMP matching, passenger ages and distinct strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_KEYS = 8

_SMALL = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")
_SCALES = ((10**9, "Billion"), (10**6, "Million"), (10**3, "Thousand"), (1, ""))

_VOWELS = frozenset("aeiou")


def minimum_pushes(word: str) -> int:
    """Fewest key presses to type ``word`` with letters spread over eight keys.

    The most frequent letters take the first position on a key, the next
    eight the second position, and so on.
    """
    if any(not "a" <= letter <= "z" for letter in word):
        raise ValueError("word must hold lowercase letters a-z only")
    frequencies = sorted(Counter(word).values(), reverse=True)
    return sum((rank // _KEYS + 1) * freq for rank, freq in enumerate(frequencies))


def _below_thousand(n: int) -> list[str]:
    words: list[str] = []
    hundreds, rest = divmod(n, 100)
    if hundreds:
        words += [_SMALL[hundreds], "Hundred"]
    if rest >= 20:
        tens, ones = divmod(rest, 10)
        words.append(_TENS[tens])
        if ones:
            words.append(_SMALL[ones])
    elif rest:
        words.append(_SMALL[rest])
    return words


def number_to_words(num: int) -> str:
    """English words for a non-negative integer below one trillion."""
    if num < 0:
        raise ValueError("number cannot be negative")
    if num >= 10**12:
        raise ValueError("number must be below one trillion")
    if num == 0:
        return "Zero"
    words: list[str] = []
    for size, name in _SCALES:
        chunk, num = divmod(num, size)
        if chunk:
            words += _below_thousand(chunk)
            if name:
                words.append(name)
    return " ".join(words)


def does_alice_win(s: str) -> bool:
    """Whether Alice wins the vowel game, which she does exactly when ``s`` has a vowel."""
    return any(letter in _VOWELS for letter in s)


def _prefix_table(pattern: Sequence[object]) -> list[int]:
    lps = [0] * len(pattern)
    length = 0
    k = 1
    while k < len(pattern):
        if pattern[length] == pattern[k]:
            length += 1
            lps[k] = length
            k += 1
        elif length:
            length = lps[length - 1]
        else:
            k += 1
    return lps


def kmp_count(text: Sequence[object], pattern: Sequence[object]) -> int:
    """Number of, possibly overlapping, occurrences of ``pattern`` in ``text``."""
    if len(pattern) == 0:
        raise ValueError("pattern cannot be empty")
    lps = _prefix_table(pattern)
    matches = 0
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                matches += 1
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return matches


def count_seniors(details: Iterable[str]) -> int:
    """Count passengers older than 60; the age is the two characters at offsets 11 and 12."""
    seniors = 0
    for detail in details:
        age_text = detail[11:13]
        if len(age_text) != 2 or not age_text.isdigit():
            raise ValueError(f"passenger details {detail!r} hold no age")
        seniors += int(age_text) > 60
    return seniors


def kth_distinct(arr: Sequence[str], k: int) -> str:
    """The k-th string, in order of appearance, that occurs exactly once; "" if none."""
    counts = Counter(arr)
    for item in arr:
        if counts[item] == 1:
            k -= 1
            if k == 0:
                return item
    return ""