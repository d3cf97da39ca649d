"""
Ukrainian stemmer: suffix stripping inside the RV region.

Pipeline (rv buffer threaded through as immutable bytes):
1. Endings: perfective gerund, else reflexive + adjective/participle or
   verb/noun
2. Trailing "и"
3. Derivational "ость"
4. Soft sign, then superlative "ейш(е)" and "нн" -> "н"

Examples:
- "ручкається" → "ручкаєт"
- "великого" → "велик"
- "читати" → "чит"
"""

import logging

from nltk.stem.api import StemmerI

from . import patterns
from .matcher import ReplaceResult, decode, encode, try_replace
from .patterns import SuffixPattern
from .preprocess import preprocess
from .rv import locate_rv

logger = logging.getLogger(__name__)


class UkrainianStemmer(StemmerI):
    """
    Rule-based Ukrainian stemmer, usable wherever NLTK stemmers are accepted.

    Args:
        trace: Log every rule that changes the rv buffer (DEBUG level)
    """

    def __init__(self, trace: bool = False):
        self.trace = trace

    def __repr__(self):
        return f"UkrainianStemmer(trace={self.trace})"

    def _apply(self, rv: bytes, pattern: SuffixPattern, replacement: bytes = b"") -> ReplaceResult:
        result = try_replace(rv, pattern, replacement)
        if self.trace and result.changed:
            logger.debug(f"{pattern.name}: {decode(rv)!r} -> {decode(result.buffer)!r}")
        return result

    def _step_endings(self, rv: bytes) -> bytes:
        result = self._apply(rv, patterns.PERFECTIVEGROUND)
        if result.changed:
            return result.buffer

        rv = self._apply(result.buffer, patterns.REFLEXIVE).buffer

        result = self._apply(rv, patterns.ADJECTIVE)
        if result.changed:
            return self._apply(result.buffer, patterns.PARTICIPLE).buffer

        result = self._apply(rv, patterns.VERB)
        if result.changed:
            return result.buffer
        return self._apply(rv, patterns.NOUN).buffer

    def _step_trailing_i(self, rv: bytes) -> bytes:
        return self._apply(rv, patterns.TRAILING_I).buffer

    def _step_derivational(self, rv: bytes) -> bytes:
        if patterns.DERIVATIONAL.search(decode(rv)) is None:
            return rv
        return self._apply(rv, patterns.OST).buffer

    def _step_soft_sign(self, rv: bytes) -> bytes:
        result = self._apply(rv, patterns.SOFT_SIGN)
        if not result.changed:
            return rv

        rv = self._apply(result.buffer, patterns.SUPERLATIVE).buffer
        return self._apply(rv, patterns.DOUBLE_N, "н".encode("utf-8")).buffer

    def stem(self, token: str) -> str:
        """
        Stem a single word.

        Args:
            token: Word in any case, apostrophes allowed

        Returns:
            Stem (normalization key, not necessarily a real word). Words
            without vowels come back preprocessed but otherwise unchanged.

        Raises:
            InvalidEncodingError: token is not encodable as UTF-8 (lone
                surrogates), or reassembled bytes are not valid UTF-8
                (pipeline bug, unreachable for well-formed input)
        """
        word = preprocess(token)
        encode(word)

        split = locate_rv(word)
        if split is None:
            return word

        rv = split.rv
        for step in (
            self._step_endings,
            self._step_trailing_i,
            self._step_derivational,
            self._step_soft_sign,
        ):
            rv = step(rv)

        stemmed = decode(split.head + rv)
        if self.trace:
            logger.debug(f"stem({token!r}) = {stemmed!r}")
        return stemmed


# Initialize stemmer once (pattern catalog is read-only, safe to share)
_stemmer = UkrainianStemmer()


def stem_word(word: str) -> str:
    """
    Stem a single Ukrainian word.

    Examples:
        >>> stem_word("ручкається")
        'ручкаєт'
        >>> stem_word("рученька")
        'рученьк'
        >>> stem_word("ПРСТ")
        'прст'
    """
    return _stemmer.stem(word)
