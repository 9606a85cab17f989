"""UTF-8 boundary helpers.

Segmentation works on str. Byte input goes through decode(), which maps
every byte that is not part of a well-formed sequence to one escape code
point (the "surrogateescape" error handler), and encode() reverses that
exactly. Malformed input therefore segments one raw byte at a time and
still round-trips byte for byte.
"""

from typing import Iterator

ERRORS = "surrogateescape"


def _is_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def next_char_length(data: bytes, index: int) -> int:
    """Byte length of the well-formed UTF-8 character at index.

    Args:
        data: Encoded text.
        index: Byte offset of the first byte.

    Returns:
        1 to 4, or 0 if the bytes at index do not start a well-formed
        character (bad lead byte, bad or missing continuation bytes,
        overlong forms, surrogates, values above U+10FFFF).
    """
    if index >= len(data):
        return 0

    lead = data[index]
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        length, low, high = 2, 0x80, 0xBF
    elif lead == 0xE0:
        length, low, high = 3, 0xA0, 0xBF
    elif lead == 0xED:
        length, low, high = 3, 0x80, 0x9F
    elif 0xE1 <= lead <= 0xEF:
        length, low, high = 3, 0x80, 0xBF
    elif lead == 0xF0:
        length, low, high = 4, 0x90, 0xBF
    elif lead == 0xF4:
        length, low, high = 4, 0x80, 0x8F
    elif 0xF1 <= lead <= 0xF3:
        length, low, high = 4, 0x80, 0xBF
    else:
        return 0

    if index + length > len(data):
        return 0
    if not low <= data[index + 1] <= high:
        return 0
    for offset in range(2, length):
        if not _is_continuation(data[index + offset]):
            return 0
    return length


def iter_chars(data: bytes) -> Iterator[bytes]:
    """Yield each well-formed character, or a single raw byte where the
    input is malformed."""
    index = 0
    while index < len(data):
        length = next_char_length(data, index) or 1
        yield data[index:index + length]
        index += length


def length(data: bytes) -> int:
    """Number of characters, counting each malformed byte as one."""
    return sum(1 for _ in iter_chars(data))


def truncate(data: bytes, max_bytes: int) -> bytes:
    """Cut data to at most max_bytes without splitting a character."""
    if max_bytes <= 0:
        return b""
    if max_bytes >= len(data):
        return data

    end = 0
    for char in iter_chars(data):
        if end + len(char) > max_bytes:
            break
        end += len(char)
    return data[:end]


def is_valid(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def decode(data: bytes) -> str:
    """Decode losslessly; malformed bytes become escape code points."""
    return data.decode("utf-8", errors=ERRORS)


def encode(text: str) -> bytes:
    """Inverse of decode()."""
    return text.encode("utf-8", errors=ERRORS)
