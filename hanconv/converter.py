"""End-to-end text converter.

Composes one segmenter and one conversion chain:
    text → segment → convert through chain → concatenate
"""

from . import utf8
from .conversion import ConversionChain
from .segmentation import Segmenter


class Converter:
    """Segmentation plus conversion chain.

    Holds no state besides its two collaborators, so one instance can
    serve concurrent convert() calls while its dictionaries stay
    unmodified.
    """

    def __init__(self, name: str, segmenter: Segmenter, chain: ConversionChain):
        self.name = name
        self.segmenter = segmenter
        self.chain = chain

    def convert(self, text: str | bytes) -> str | bytes:
        """Convert text.

        Args:
            text: A str, or UTF-8 bytes. Malformed bytes pass through
                unchanged, one byte per segment.

        Returns:
            Converted text of the same type as the input.
        """
        if isinstance(text, (bytes, bytearray)):
            if not text:
                return bytes(text)
            return utf8.encode(self._convert(utf8.decode(bytes(text))))
        if not text:
            return text
        return self._convert(text)

    def _convert(self, text: str) -> str:
        segments = self.segmenter.segment(text)
        return self.chain.convert(segments).to_string()

    def convert_to_buffer(self, text: str | bytes, buffer: bytearray) -> int:
        """Write the UTF-8 result into buffer.

        Output longer than the buffer is cut on a character boundary.

        Returns:
            Number of bytes written.
        """
        converted = self.convert(text)
        if isinstance(converted, str):
            converted = utf8.encode(converted)
        converted = utf8.truncate(converted, len(buffer))
        buffer[:len(converted)] = converted
        return len(converted)

    def __repr__(self) -> str:
        return f"Converter({self.name!r}, {len(self.chain)} steps)"
