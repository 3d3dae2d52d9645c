"""A prefix tree of words, walked one character at a time."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["TrieNode"]


@dataclass
class TrieNode:
    """One node of a trie. ``end`` marks that a word finishes here."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    end: bool = False

    def insert(self, word: str) -> None:
        """Add ``word`` below this node, creating nodes as needed."""
        node = self
        for char in word:
            node = node.children.setdefault(char, TrieNode())
        node.end = True

    def __contains__(self, word: object) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        if not isinstance(word, str):
            return False
        node = self
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.end