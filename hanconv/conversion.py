"""Dictionary substitution over segmented text.

A Conversion maps each segment through one dictionary's default value.
A ConversionChain threads the segment sequence through several
conversions in order. Segments are never split or merged between steps:
their count is fixed by the initial segmentation.
"""

from typing import Iterable

from .dicts import Dict
from .segmentation import Segments


class Conversion:
    """A single conversion step backed by one dictionary."""

    def __init__(self, dictionary: Dict):
        self.dictionary = dictionary

    def convert(self, phrase: str) -> str:
        """Replace an exactly matching phrase with its default value.

        Unmatched phrases come back unchanged.
        """
        if not phrase:
            return phrase
        entry = self.dictionary.match(phrase)
        if entry is None:
            return phrase
        return entry.default

    def convert_segments(self, segments: Segments) -> Segments:
        """Convert every segment, giving owned segments of the same count."""
        result = Segments()
        for segment in segments:
            result.add_owned(self.convert(segment.text))
        return result


class ConversionChain:
    """Conversions applied in sequence."""

    def __init__(self, conversions: Iterable[Conversion]):
        self.conversions: list[Conversion] = list(conversions)

    def convert(self, segments: Segments) -> Segments:
        """Feed each step's output segments to the next step."""
        for conversion in self.conversions:
            segments = conversion.convert_segments(segments)
        return segments

    def __len__(self) -> int:
        return len(self.conversions)
