"""
word_search.core

The data structures behind the word search assistant:
 - PrefixTrie: shared-prefix word storage and prefix enumeration
 - RankedDictionary: trie + usage ranks, rank-ordered autocompletion
 - error types
"""

from .trie import PrefixTrie, TrieNode
from .ranked_dictionary import RankedDictionary, UNKNOWN_RANK
from .errors import WordSearchError, DictionaryLoadError, ConfigError

__all__ = [
    "PrefixTrie",
    "TrieNode",
    "RankedDictionary",
    "UNKNOWN_RANK",
    "WordSearchError",
    "DictionaryLoadError",
    "ConfigError",
]
