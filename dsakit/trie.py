"""A prefix tree over words made of the lowercase letters a to z."""

from __future__ import annotations

from collections.abc import Iterable
from string import ascii_lowercase

_ALPHABET = frozenset(ascii_lowercase)


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


def _check_word(word: str) -> None:
    invalid = set(word) - _ALPHABET
    if invalid:
        raise ValueError(f"word {word!r} has characters outside a-z: {sorted(invalid)}")


class Trie:
    """Stores whole words and answers exact-match lookups."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        _check_word(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Return whether word was inserted; a mere prefix does not count."""
        _check_word(word)
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.terminal

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not _ALPHABET.issuperset(word):
            return False
        return self.search(word)