"""Base dictionary interface.

All dictionaries inherit from Dict and answer the same three lookups.
Dictionaries are built once at load time and never mutated afterwards,
so one instance can be shared by any number of readers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..schema import DictEntry, Lexicon


class Dict(ABC):
    """Base class for dictionaries.

    Subclasses must implement:
        - match(word) -> entry whose key equals word, or None
        - match_prefix(word) -> entry with the longest key prefixing word
        - match_all_prefixes(word) -> every entry whose key prefixes word
        - max_key_length: longest key length
        - lexicon: all entries, sorted by key
    """

    @abstractmethod
    def match(self, word: str) -> Optional[DictEntry]:
        """Exact match lookup."""

    @abstractmethod
    def match_prefix(self, word: str) -> Optional[DictEntry]:
        """Longest prefix match lookup."""

    @abstractmethod
    def match_all_prefixes(self, word: str) -> list[DictEntry]:
        """All prefix matches."""

    @property
    @abstractmethod
    def max_key_length(self) -> int:
        """Length of the longest key."""

    @property
    @abstractmethod
    def lexicon(self) -> Lexicon:
        """Entries of this dictionary, sorted by key."""
