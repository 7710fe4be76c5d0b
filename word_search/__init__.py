# word_search/__init__.py
# exact lookup + rank-ordered autocompletion over a word list

from .core import (
    PrefixTrie,
    TrieNode,
    RankedDictionary,
    UNKNOWN_RANK,
    WordSearchError,
    DictionaryLoadError,
    ConfigError,
)

__all__ = [
    "PrefixTrie",
    "TrieNode",
    "RankedDictionary",
    "UNKNOWN_RANK",
    "WordSearchError",
    "DictionaryLoadError",
    "ConfigError",
]

__version__ = "0.1.0"
