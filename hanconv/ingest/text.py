"""Tab-delimited lexicon ingestor.

Format: one entry per line.
    key<TAB>value [value ...]

Empty lines and lines starting with # are skipped. A line without a
tab yields a zero-value entry; malformed lines never fail the load.
"""

from pathlib import Path
from typing import Iterator, Optional

from ..schema import DictEntry, parse_line
from .base import Ingestor, IngestResult


class TextIngestor(Ingestor):
    """Ingestor for tab-delimited lexicon text files."""

    file_extensions = [".txt", ".ocd"]

    def __init__(self, sort: bool = True, comment_char: str = "#"):
        super().__init__(sort)
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[tuple[Optional[DictEntry], int]]:
        """Parse a lexicon text file.

        Lines end at LF only. A CR anywhere but before the LF belongs to
        the key or value. Undecodable bytes are kept as escape code points,
        so keys and values round-trip byte for byte.

        Args:
            filepath: Path to text file.

        Yields:
            Tuples of (entry, line_number), entry None for skipped lines.
        """
        with open(
            filepath, "r", encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as f:
            for line_num, line in enumerate(f, start=1):
                yield parse_line(line, self.comment_char), line_num


def ingest(
    filepath: Path | str,
    sort: bool = True,
    comment_char: str = "#",
) -> IngestResult:
    """Convenience function to ingest a lexicon text file.

    Args:
        filepath: Path to text file.
        sort: Sort the lexicon by key.
        comment_char: Prefix marking comment lines.

    Returns:
        IngestResult with the lexicon.
    """
    ingestor = TextIngestor(sort=sort, comment_char=comment_char)
    return ingestor.ingest(filepath)
