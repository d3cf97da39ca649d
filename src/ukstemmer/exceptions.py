"""Error types raised by the Ukrainian stemmer."""


class StemmerError(Exception):
    """Base class for stemmer failures"""


class PatternCompilationError(StemmerError):
    """A catalog pattern failed to compile (raised on import, never per call)"""

    def __init__(self, name: str, source: str, reason: str):
        self.name = name
        self.source = source
        super().__init__(f"Pattern {name} failed to compile: {reason} (source: {source!r})")


class InvalidEncodingError(StemmerError):
    """Bytes could not be decoded as UTF-8.

    For valid input this means byte slicing crossed a character boundary,
    i.e. a bug in the pipeline rather than a bad word.
    """
