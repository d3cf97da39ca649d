"""
Match-and-replace over raw UTF-8 byte buffers.

The pattern engine runs on decoded text, and match boundaries are converted
back to byte offsets. Since every boundary comes from a character index, a
byte offset can never split a multi-byte character.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import InvalidEncodingError
from .patterns import SuffixPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplaceResult:
    """Buffer after a replacement attempt"""
    buffer: bytes
    changed: bool  # content differs from the input buffer


def decode(buffer: bytes) -> str:
    """
    Strict UTF-8 decode.

    Raises:
        InvalidEncodingError: buffer is not valid UTF-8
    """
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Invalid UTF-8 buffer {buffer!r}: {e}")
        raise InvalidEncodingError(f"not correct utf8 bytes: {buffer!r}") from e


def encode(text: str) -> bytes:
    """
    Strict UTF-8 encode.

    Raises:
        InvalidEncodingError: text holds lone surrogates
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.error(f"Text not encodable as UTF-8 {text!r}: {e}")
        raise InvalidEncodingError(f"not encodable as utf8: {text!r}") from e


def replace_span(buffer: bytes, replacement: bytes, start: int, end: int) -> bytes:
    """
    Rebuild buffer with bytes [start, end) swapped for replacement.

    Examples:
        >>> replace_span(b"012345678", b"_", 1, 4)
        b'0_45678'
    """
    return buffer[:start] + replacement + buffer[end:]


def find_span(buffer: bytes, pattern: SuffixPattern) -> Optional[Tuple[int, int]]:
    """Byte offsets (start, end) of the pattern's leftmost match, or None."""
    text = decode(buffer)
    match = pattern.search(text)
    if match is None:
        return None
    start = len(text[:match.start()].encode("utf-8"))
    end = start + len(match.group(0).encode("utf-8"))
    return start, end


def try_replace(buffer: bytes, pattern: SuffixPattern, replacement: bytes = b"") -> ReplaceResult:
    """
    Replace the pattern's match in buffer.

    Args:
        buffer: UTF-8 bytes of the region under test
        pattern: Catalog pattern (end-anchored)
        replacement: Bytes to put in place of the matched span

    Returns:
        ReplaceResult with the new buffer; changed is False when nothing
        matched or when the replacement reproduced the same bytes
    """
    span = find_span(buffer, pattern)
    if span is None:
        return ReplaceResult(buffer=buffer, changed=False)

    start, end = span
    result = replace_span(buffer, replacement, start, end)
    return ReplaceResult(buffer=result, changed=result != buffer)
