"""Dictionary entry and lexicon data structures for hanconv.

Core concept:
    - An entry maps one key to zero, one or many candidate values
    - The first declared value is the default replacement
    - A lexicon is an ordered list of entries, sorted once at load time

Text format (one entry per line):
    简体<TAB>簡體            # single value
    发<TAB>髪 發             # values separated by whitespace, first is default
    # comment               # skipped, as are empty lines
"""

from dataclasses import dataclass
from functools import total_ordering
from operator import attrgetter
from typing import Iterable, Iterator, Optional, Sequence, Union


@total_ordering
class DictEntry:
    """Base for dictionary entries.

    Equality, hashing and ordering use the key only; values never
    participate in comparison.
    """

    key: str
    values: tuple[str, ...]

    @property
    def default(self) -> str:
        """First declared value, or the key itself when there are none."""
        values = self.values
        return values[0] if values else self.key

    @property
    def num_values(self) -> int:
        return len(self.values)

    @property
    def key_length(self) -> int:
        return len(self.key)

    def to_string(self) -> str:
        """Render the entry in the lexicon text format."""
        if not self.values:
            return self.key
        return self.key + "\t" + " ".join(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "DictEntry") -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass(frozen=True, eq=False)
class NoValueEntry(DictEntry):
    """Entry with a key only; converts a key to itself."""

    key: str

    @property
    def values(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True, eq=False)
class SingleValueEntry(DictEntry):
    """Entry with exactly one value."""

    key: str
    value: str

    @property
    def values(self) -> tuple[str, ...]:
        return (self.value,)

    @property
    def default(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class MultiValueEntry(DictEntry):
    """Entry with several ordered candidate values."""

    key: str
    values: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))


def make_entry(
    key: str,
    values: Union[str, Sequence[str], None] = None,
) -> DictEntry:
    """Create an entry using the smallest fitting representation.

    Args:
        key: Entry key.
        values: None, a single value, or a sequence of values.

    Returns:
        NoValueEntry, SingleValueEntry or MultiValueEntry.
    """
    if values is None:
        return NoValueEntry(key)
    if isinstance(values, str):
        return SingleValueEntry(key, values)

    values = tuple(values)
    if not values:
        return NoValueEntry(key)
    if len(values) == 1:
        return SingleValueEntry(key, values[0])
    return MultiValueEntry(key, values)


def parse_line(line: str, comment_char: str = "#") -> Optional[DictEntry]:
    """Parse one line of the lexicon text format.

    Only the first tab separates key from values. A line without a tab
    becomes a zero-value entry; no other validation is done.

    Args:
        line: Raw line, possibly with a trailing newline.
        comment_char: Prefix marking comment lines.

    Returns:
        Entry, or None for empty and comment lines.
    """
    line = line.rstrip("\r\n")
    if not line or line.startswith(comment_char):
        return None

    key, sep, rest = line.partition("\t")
    if not sep:
        return NoValueEntry(key)
    return make_entry(key, rest.split())


class Lexicon:
    """An ordered collection of dictionary entries.

    Entries are appended in load order and sorted once with sort().
    Duplicate keys are not rejected; find_duplicate_key() is an opt-in
    check for loaders.
    """

    def __init__(self, entries: Optional[Iterable[DictEntry]] = None):
        self._entries: list[DictEntry] = list(entries) if entries else []

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        comment_char: str = "#",
    ) -> "Lexicon":
        """Build an unsorted lexicon from lines of the text format."""
        lexicon = cls()
        for line in lines:
            entry = parse_line(line, comment_char)
            if entry is not None:
                lexicon.add(entry)
        return lexicon

    @property
    def entries(self) -> list[DictEntry]:
        return self._entries

    def add(self, entry: DictEntry) -> None:
        """Append an entry."""
        self._entries.append(entry)

    def extend(self, entries: Iterable[DictEntry]) -> None:
        self._entries.extend(entries)

    def sort(self) -> None:
        """Stable sort by key, in code point order.

        This matches UTF-8 byte order for well-formed keys. Keys holding
        escaped bad bytes (U+DC80..U+DCFF) sort before characters from
        U+E000 up, unlike the raw bytes they stand for. Lookups use the
        same order, so they are unaffected.
        """
        self._entries.sort(key=attrgetter("key"))

    def is_sorted(self) -> bool:
        entries = self._entries
        return all(
            entries[i - 1].key <= entries[i].key for i in range(1, len(entries))
        )

    def find_duplicate_key(self) -> Optional[str]:
        """Return the first key that occurs twice, or None.

        Works on a sorted copy, so the lexicon itself is left untouched.
        """
        keys = sorted(entry.key for entry in self._entries)
        for previous, current in zip(keys, keys[1:]):
            if previous == current:
                return current
        return None

    def is_unique(self) -> bool:
        return self.find_duplicate_key() is None

    def to_lines(self) -> Iterator[str]:
        """Yield each entry rendered in the text format."""
        for entry in self._entries:
            yield entry.to_string()

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> DictEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[DictEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries)"
