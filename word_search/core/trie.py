# trie.py
# Prefix trie backing the word dictionary.
# Nodes are created lazily on insert and never removed, so the tree only grows.
# Ordering of completions is NOT handled here, see ranked_dictionary.py.

from __future__ import annotations
from typing import Dict, List, Optional, Tuple


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: True if the path from the root to this node spells a stored word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False


class PrefixTrie:
    """
    Set of words stored as a shared-prefix tree. Supports:
     - insert(word)
     - exact membership via search(word)
     - enumeration of every stored word below a prefix
    Comparison is raw character equality (no case folding).
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word. Inserting the same word twice is a no-op.
        The empty string marks the root itself.
        """
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
            node = nxt
        if not node.is_word:
            node.is_word = True
            self._size += 1

    # search/traversal ---------------------------------------------------------
    def search(self, word: str) -> bool:
        """True only if `word` itself was inserted (not just a prefix of one)."""
        node = self._walk(word)
        return node is not None and node.is_word

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def prefix_matches(self, prefix: str) -> List[str]:
        """
        Return every stored word starting with `prefix`, prefix included if stored.
        Order follows the dict order of children and carries no meaning,
        callers sort the result themselves.
        """
        start = self._walk(prefix)
        if start is None:
            return []

        out: List[str] = []
        # explicit stack of (node, path so far); paths are new strings per step
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_word:
                out.append(path)
            for ch, child in node.children.items():
                stack.append((child, path + ch))
        return out

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # convenience -----------------------------------------------------
    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        """Number of distinct stored words."""
        return self._size
