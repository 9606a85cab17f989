"""Base ingestor interface for lexicon sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading lexicons from any source format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterator, Optional

from ..schema import DictEntry, Lexicon

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a lexicon source."""

    lexicon: Lexicon
    source_path: str
    dict_name: str
    total_lines: int = 0        # Lines read, including comments
    total_entries: int = 0      # Entries added to the lexicon
    total_no_value: int = 0     # Entries without any value

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_entries}/{self.total_lines} entries, "
            f"{self.total_no_value} without values)"
        )


class Ingestor(ABC):
    """Base class for lexicon ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (entry or None, line_number) tuples
        - file_extensions: list of supported extensions, used by
          ingestor_for_file() to pick an ingestor for a path

    The ingest() method collects entries into a sorted Lexicon. Read
    errors propagate, so a failed load never yields a partial lexicon.
    """

    file_extensions: list[str] = []

    def __init__(self, sort: bool = True):
        """Initialize ingestor.

        Args:
            sort: Sort the lexicon by key after loading.
        """
        self.sort = sort

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[Optional[DictEntry], int]]:
        """Parse source file and yield one tuple per line read.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (entry, line_number); entry is None for lines that
            hold no entry (comments, blank lines).
        """
        pass

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest lexicon from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with the lexicon and statistics.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        filepath = Path(filepath)

        lexicon = Lexicon()
        lines = 0
        no_value = 0
        for entry, line_num in self.parse(filepath):
            lines = line_num
            if entry is None:
                continue
            lexicon.add(entry)
            if entry.num_values == 0:
                no_value += 1

        if self.sort:
            lexicon.sort()

        result = IngestResult(
            lexicon=lexicon,
            source_path=str(filepath.resolve()),
            dict_name=self.get_dict_name(filepath),
            total_lines=lines,
            total_entries=len(lexicon),
            total_no_value=no_value,
        )
        logger.debug("Ingested %r from %s", result, filepath)
        return result
