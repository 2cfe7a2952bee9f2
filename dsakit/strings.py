"""String algorithms: Rabin-Karp search, whitespace removal, word counts, binary form."""

from __future__ import annotations

from collections import Counter

MODULUS = 101
BASE = 26


def rabin_karp_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of pattern in text, or -1."""
    n, m = len(text), len(pattern)
    if m > n:
        return -1

    high = pow(BASE, m - 1, MODULUS) if m else 1
    pattern_hash = 0
    window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (pattern_hash * BASE + ord(p_char)) % MODULUS
        window_hash = (window_hash * BASE + ord(t_char)) % MODULUS

    for start in range(n - m + 1):
        if pattern_hash == window_hash and text[start : start + m] == pattern:
            return start
        end = start + m
        if end < n:
            window_hash = (
                (window_hash - ord(text[start]) * high) * BASE + ord(text[end])
            ) % MODULUS
    return -1


def remove_spaces(text: str) -> str:
    """Return text with every run of whitespace removed."""
    return "".join(text.split())


def word_frequencies(text: str) -> dict[str, int]:
    """Count whitespace-separated words, returned in sorted word order."""
    counts = Counter(text.split())
    return {word: counts[word] for word in sorted(counts)}


def count_occurrences(text: str, pattern: str) -> int:
    """Count the places where pattern occurs in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    return sum(
        1 for start in range(len(text) - len(pattern) + 1) if text.startswith(pattern, start)
    )


def int_to_binary(number: int) -> str:
    """Return the binary digits of number without leading zeros.

    Zero gives an empty string.
    """
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    bits = []
    while number > 0:
        number, bit = divmod(number, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))