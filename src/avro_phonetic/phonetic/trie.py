"""Prefix tree over pattern text for longest-match lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class TrieNode(Generic[T]):
    """A node keyed by one character; terminal nodes carry a payload."""

    children: dict[str, TrieNode[T]] = field(default_factory=dict)
    is_terminal: bool = False
    payload: T | None = None


class Trie(Generic[T]):
    """Pattern index answering "longest pattern starting at position".

    Lookups walk characters (code points) of the text, so multi-byte source
    patterns and replacements need no special handling.
    """

    def __init__(self) -> None:
        self._root: TrieNode[T] = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.exists(text)

    def insert(self, text: str, payload: T) -> T | None:
        """Store payload under text and return the payload it replaced, if any."""
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child

        previous = node.payload if node.is_terminal else None
        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.payload = payload
        return previous

    def search_longest(self, text: str, position: int = 0) -> T | None:
        node = self._root
        last_match: T | None = None
        for index in range(position, len(text)):
            node = node.children.get(text[index])
            if node is None:
                break
            if node.is_terminal:
                last_match = node.payload
        return last_match

    def search_all(self, text: str, position: int = 0) -> list[T]:
        """Return every pattern matching at position, longest first."""
        node = self._root
        matches: list[T] = []
        for index in range(position, len(text)):
            node = node.children.get(text[index])
            if node is None:
                break
            if node.is_terminal:
                matches.append(node.payload)
        matches.reverse()
        return matches

    def get(self, text: str) -> T | None:
        """Return the payload stored under exactly text."""
        node = self._find_node(text)
        return node.payload if node is not None and node.is_terminal else None

    def exists(self, text: str) -> bool:
        node = self._find_node(text)
        return node is not None and node.is_terminal

    def _find_node(self, text: str) -> TrieNode[T] | None:
        node: TrieNode[T] | None = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node
