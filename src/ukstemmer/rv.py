"""RV region: everything after the first vowel of a word."""

from dataclasses import dataclass
from typing import Optional

from .matcher import encode
from .patterns import RVRE


@dataclass(frozen=True)
class RVSplit:
    head: bytes  # up to and including the first vowel, never rewritten
    rv: bytes    # region the suffix rules operate on


def locate_rv(word: str) -> Optional[RVSplit]:
    """
    Split a normalized word at the end of its first vowel.

    Returns None when the word has no vowel (nothing to stem).

    Examples:
        >>> split = locate_rv("ручкається")
        >>> split.head.decode("utf-8"), split.rv.decode("utf-8")
        ('ру', 'чкається')
        >>> locate_rv("бг") is None
        True
    """
    match = RVRE.search(word)
    if match is None:
        return None

    encoded = encode(word)
    end = len(encode(word[:match.end()]))
    return RVSplit(head=encoded[:end], rv=encoded[end:])
