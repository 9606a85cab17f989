"""Text segmentation for hanconv.

Splits text into segments that conversion steps replace whole:
- MaxMatchSegmenter: greedy forward maximum matching against a dictionary
- CharacterSegmenter: one segment per code point

Every segmenter covers its input exactly: joining the segments in order
gives back the input text, malformed input included.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Iterable, Iterator, Optional

from .dicts import Dict
from .errors import MissingFieldError
from .schema import DictEntry

logger = logging.getLogger(__name__)


class SegmentOrigin(Enum):
    """Where a segment's text came from."""

    OWNED = "owned"            # Copied from the input or produced by conversion
    REFERENCE = "reference"    # The key string of a matched dictionary entry


@dataclass(frozen=True)
class Segment:
    """One unit of segmented text."""

    text: str
    origin: SegmentOrigin = SegmentOrigin.OWNED

    @property
    def is_reference(self) -> bool:
        return self.origin is SegmentOrigin.REFERENCE


class Segments:
    """An ordered sequence of segments."""

    def __init__(self, segments: Optional[Iterable[Segment]] = None):
        self._segments: list[Segment] = list(segments) if segments else []

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "Segments":
        """Create owned segments from plain strings."""
        return cls(Segment(s) for s in strings)

    def add_owned(self, text: str) -> None:
        self._segments.append(Segment(text, SegmentOrigin.OWNED))

    def add_reference(self, entry: DictEntry) -> None:
        """Add a segment sharing the matched entry's key string."""
        self._segments.append(Segment(entry.key, SegmentOrigin.REFERENCE))

    def texts(self) -> list[str]:
        return [segment.text for segment in self._segments]

    def to_string(self) -> str:
        """Concatenate all segments in order."""
        return "".join(segment.text for segment in self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"Segments({self.texts()!r})"


class Segmenter(ABC):
    """Base class for segmentation strategies."""

    @abstractmethod
    def segment(self, text: str) -> Segments:
        """Split text into segments covering it exactly."""
        pass


class MaxMatchSegmenter(Segmenter):
    """Forward maximum matching segmentation.

    At each position the longest dictionary key matching the upcoming
    text is taken; if none matches, a single code point is. Never
    backtracks, so the result is unique for a given dictionary.
    """

    def __init__(self, dictionary: Dict):
        self.dictionary = dictionary

    def segment(self, text: str) -> Segments:
        segments = Segments()
        max_key_length = self.dictionary.max_key_length
        position = 0
        text_length = len(text)

        while position < text_length:
            entry = self._longest_match(text, position, max_key_length)
            if entry is not None:
                segments.add_reference(entry)
                position += entry.key_length
            else:
                segments.add_owned(text[position])
                position += 1

        return segments

    def _longest_match(
        self,
        text: str,
        start: int,
        max_key_length: int,
    ) -> Optional[DictEntry]:
        longest = min(len(text) - start, max_key_length)
        for length in range(longest, 0, -1):
            entry = self.dictionary.match(text[start:start + length])
            if entry is not None:
                return entry
        return None


class CharacterSegmenter(Segmenter):
    """Splits text into single code points, ignoring any dictionary."""

    def segment(self, text: str) -> Segments:
        return Segments.from_strings(text)


# Register available segmenters by config type
SEGMENTERS: dict[str, type[Segmenter]] = {
    "mmseg": MaxMatchSegmenter,
    "chars": CharacterSegmenter,
}

DEFAULT_SEGMENTER = "mmseg"


def create_segmenter(segmenter_type: str, dictionary: Optional[Dict]) -> Segmenter:
    """Create a segmenter from its config type.

    Unknown types fall back to maximum matching.

    Args:
        segmenter_type: Config type, e.g. "mmseg".
        dictionary: Dictionary for dictionary-driven segmenters.

    Returns:
        Segmenter instance.
    """
    if segmenter_type not in SEGMENTERS:
        logger.warning(
            "Unknown segmentation type %r, using %r",
            segmenter_type,
            DEFAULT_SEGMENTER,
        )
        segmenter_type = DEFAULT_SEGMENTER

    segmenter_cls = SEGMENTERS[segmenter_type]
    if segmenter_cls is CharacterSegmenter:
        return CharacterSegmenter()
    if dictionary is None:
        raise MissingFieldError("segmentation.dict")
    return segmenter_cls(dictionary)
