"""Ordered composition of dictionaries.

Members are queried in list order, which is their priority: for an
identical key, an earlier dictionary shadows a later one.
"""

from typing import Iterable, Iterator, Optional

from ..schema import DictEntry, Lexicon
from .base import Dict


class DictGroup(Dict):
    """A group of dictionaries searched with fixed priority."""

    def __init__(self, dicts: Iterable[Dict]):
        # Members are shared, not copied.
        self._dicts: list[Dict] = list(dicts)

    @property
    def dicts(self) -> list[Dict]:
        return self._dicts

    @property
    def max_key_length(self) -> int:
        return max((d.max_key_length for d in self._dicts), default=0)

    @property
    def lexicon(self) -> Lexicon:
        """Merged lexicon of all members, sorted by key."""
        lexicon = Lexicon()
        for d in self._dicts:
            lexicon.extend(d.lexicon)
        lexicon.sort()
        return lexicon

    def match(self, word: str) -> Optional[DictEntry]:
        for d in self._dicts:
            entry = d.match(word)
            if entry is not None:
                return entry
        return None

    def match_prefix(self, word: str) -> Optional[DictEntry]:
        """Longest prefix match across all members.

        Equal lengths keep the member seen first, as the comparison is
        strictly greater.
        """
        best: Optional[DictEntry] = None
        best_length = 0
        for d in self._dicts:
            entry = d.match_prefix(word)
            if entry is not None and entry.key_length > best_length:
                best = entry
                best_length = entry.key_length
        return best

    def match_all_prefixes(self, word: str) -> list[DictEntry]:
        """All prefix matches, longest key first, one entry per key.

        When members share a key, the higher priority member's entry is
        kept.
        """
        entries: list[DictEntry] = []
        for d in self._dicts:
            entries.extend(d.match_all_prefixes(word))

        # sort() is stable, so member order survives among equal keys
        entries.sort(key=lambda e: (-e.key_length, e.key))

        seen: set[str] = set()
        unique = []
        for entry in entries:
            if entry.key not in seen:
                seen.add(entry.key)
                unique.append(entry)
        return unique

    def __len__(self) -> int:
        return len(self._dicts)

    def __getitem__(self, index: int) -> Dict:
        return self._dicts[index]

    def __iter__(self) -> Iterator[Dict]:
        return iter(self._dicts)

    def __repr__(self) -> str:
        return f"DictGroup({len(self._dicts)} dicts)"
