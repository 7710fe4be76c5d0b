# ranked_dictionary.py
"""
RankedDictionary - trie + per-word usage ranks.

Purpose:
 - own the PrefixTrie and the word -> rank table, and keep them in lock-step
 - every successful search counts as a hit and bumps the rank
 - autocomplete orders prefix matches by rank (desc), then word (asc)

Words only enter through load_words()/load_file() with rank 0.
Ranks only go up. Nothing is ever removed.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from word_search.core.errors import DictionaryLoadError
from word_search.core.trie import PrefixTrie

logger = logging.getLogger(__name__)

# returned by get_rank() for words that were never loaded; real ranks are >= 0
UNKNOWN_RANK = -1


class RankedDictionary:
    """Word dictionary with rank-aware lookup and autocompletion.
    Public API:
      - load_words(lines) -> int
      - load_file(path) -> int
      - search_word(word) -> bool
      - has_prefix(prefix) -> bool
      - auto_complete(prefix, limit=None) -> List[str]
      - increment_rank(word) -> None
      - get_rank(word) -> int  (UNKNOWN_RANK if not loaded)
    """

    def __init__(self) -> None:
        self._trie = PrefixTrie()
        self._ranks: Dict[str, int] = {}

    # Loading ---------------------------------------------------------
    def load_words(self, source: Iterable[str]) -> int:
        """
        Add one word per line from `source`.
        Blank lines and words already present are skipped, so loading twice
        never resets a rank. Returns how many new words were added.
        Raises DictionaryLoadError if reading or decoding the source fails;
        anything added before the failure is kept.
        """
        added = 0
        skipped = 0
        try:
            for line in source:
                word = line.strip()
                if not word or word in self._ranks:
                    skipped += 1
                    continue
                self._trie.insert(word)
                self._ranks[word] = 0
                added += 1
        except OSError as e:
            name = getattr(source, "name", "word source")
            logger.warning("load aborted after %d words: %s", added, e)
            raise DictionaryLoadError(str(name), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            name = getattr(source, "name", "word source")
            logger.warning("load aborted after %d words: %s", added, e)
            raise DictionaryLoadError(str(name), f"not valid {e.encoding} text") from e

        logger.debug("loaded %d new words (%d lines skipped)", added, skipped)
        return added

    def load_file(self, path: str, encoding: str = "utf-8") -> int:
        """Open `path` and feed its lines to load_words()."""
        try:
            with open(path, "r", encoding=encoding) as f:
                added = self.load_words(f)
        except OSError as e:
            logger.warning("cannot read %s: %s", path, e)
            raise DictionaryLoadError(str(path), e.strerror or str(e)) from e

        logger.info("loaded %d words from %s", added, path)
        return added

    # Lookup ---------------------------------------------------------
    # keys are stripped the same way load_words() strips lines
    def search_word(self, word: str) -> bool:
        """Exact lookup. A hit counts as a use and raises the word's rank by 1."""
        word = word.strip()
        found = self._trie.search(word)
        if found:
            self._ranks[word] += 1
        return found

    def has_prefix(self, prefix: str) -> bool:
        """True if at least one stored word starts with `prefix`."""
        return self._trie.is_prefix(prefix.strip())

    def auto_complete(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        All stored words starting with `prefix`, best ranked first.
        Equal ranks fall back to plain string order so the result is deterministic.
        An empty prefix lists the whole dictionary.
        limit: keep only the first `limit` results (None = all, negative is an error).
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        matches = self._trie.prefix_matches(prefix.strip())
        matches.sort(key=lambda w: (-self._ranks[w], w))
        if limit is not None:
            return matches[:limit]
        return matches

    # Ranks ---------------------------------------------------------
    def increment_rank(self, word: str) -> None:
        """Bump the rank of a known word. Unknown words are ignored."""
        word = word.strip()
        if word in self._ranks:
            self._ranks[word] += 1

    def get_rank(self, word: str) -> int:
        return self._ranks.get(word.strip(), UNKNOWN_RANK)

    # convenience -----------------------------------------------------
    def __contains__(self, word: str) -> bool:
        return word.strip() in self._ranks

    def __len__(self) -> int:
        return len(self._ranks)
