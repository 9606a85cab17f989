"""Sorted-array text dictionary.

Lookups binary-search a sorted lexicon. Prefix queries try every
candidate length with its own exact search instead of walking a trie,
which keeps the structure small at the cost of
O(max_key_length * log n) per prefix query.
"""

from bisect import bisect_left
import logging
from pathlib import Path
from typing import Optional, TextIO

from ..ingest.text import ingest
from ..schema import DictEntry, Lexicon
from .base import Dict

logger = logging.getLogger(__name__)


class TextDict(Dict):
    """Dictionary backed by a lexicon sorted by key."""

    def __init__(self, lexicon: Lexicon):
        """Initialize dictionary.

        Args:
            lexicon: Lexicon already sorted by key. Lookups over an
                unsorted lexicon, or one holding duplicate keys, may
                return any matching entry.
        """
        self._lexicon = lexicon
        self._keys = [entry.key for entry in lexicon]
        self._max_key_length = max(
            (entry.key_length for entry in lexicon), default=0
        )

    @classmethod
    def from_file(cls, filepath: Path | str) -> "TextDict":
        """Parse, sort and wrap a lexicon text file.

        Raises:
            OSError: If the file cannot be read.
        """
        result = ingest(filepath)
        return cls(result.lexicon)

    @property
    def max_key_length(self) -> int:
        return self._max_key_length

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def match(self, word: str) -> Optional[DictEntry]:
        keys = self._keys
        index = bisect_left(keys, word)
        if index < len(keys) and keys[index] == word:
            return self._lexicon[index]
        return None

    def match_prefix(self, word: str) -> Optional[DictEntry]:
        for length in range(min(len(word), self._max_key_length), 0, -1):
            entry = self.match(word[:length])
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(self, word: str) -> list[DictEntry]:
        """Collect prefix matches, shortest key first."""
        results = []
        for length in range(1, min(len(word), self._max_key_length) + 1):
            entry = self.match(word[:length])
            if entry is not None:
                results.append(entry)
        return results

    def serialize(self, writer: TextIO) -> None:
        """Write every entry in the lexicon text format."""
        for line in self._lexicon.to_lines():
            writer.write(line + "\n")

    def serialize_to_file(self, filepath: Path | str) -> None:
        """Save dictionary to a text file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8", newline="\n") as f:
            self.serialize(f)
        logger.debug("Wrote %d entries to %s", len(self._lexicon), filepath)

    def __len__(self) -> int:
        return len(self._lexicon)

    def __repr__(self) -> str:
        return (
            f"TextDict({len(self._lexicon)} entries, "
            f"max_key_length={self._max_key_length})"
        )
