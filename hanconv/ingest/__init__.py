"""Lexicon ingestion module.

Provides pluggable ingestors for lexicon source formats:
- Tab-delimited text lexicons (.txt, .ocd)
- Custom formats via register_ingestor(), picked by file extension

Usage:
    from hanconv.ingest import text

    result = text.ingest("path/to/STCharacters.txt")
    result.lexicon  # sorted Lexicon
"""

from pathlib import Path

from .base import Ingestor, IngestResult
from . import text

DEFAULT_INGESTOR = "text"

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "text": text.TextIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


def ingestor_for_file(filepath: Path | str) -> type[Ingestor]:
    """Pick the ingestor whose file_extensions include the file's suffix.

    Registration order decides between ingestors claiming the same
    suffix. Files with no claimed suffix use the text ingestor.
    """
    suffix = Path(filepath).suffix.lower()
    for ingestor_cls in INGESTORS.values():
        if suffix in ingestor_cls.file_extensions:
            return ingestor_cls
    return get_ingestor(DEFAULT_INGESTOR)


__all__ = [
    "Ingestor",
    "IngestResult",
    "text",
    "get_ingestor",
    "register_ingestor",
    "ingestor_for_file",
    "INGESTORS",
]
