# errors.py - exception types raised by word_search

from __future__ import annotations
from typing import Optional


class WordSearchError(Exception):
    """Base class for every error raised by word_search."""


class DictionaryLoadError(WordSearchError):
    """
    Reading a word source failed.
    Words added before the failure stay in the dictionary.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Error reading {source}: {reason}")


class ConfigError(WordSearchError):
    """Config file could not be parsed or an option value was rejected."""

    def __init__(self, msg: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(msg)
