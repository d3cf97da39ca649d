"""
Ukrainian stemmer for search and text normalization.

Reduces a single word form to an approximate stem by stripping suffixes
inside the word's RV region (everything after the first vowel).

Components:
- patterns: compiled suffix pattern catalog (built once on import)
- matcher: match-and-replace over UTF-8 byte buffers
- rv: RV region locator
- preprocess: lowercase, apostrophe removal, letter folding
- stemmer: the four-step pipeline and public entry points

The stem is a matching key, not a dictionary word.
"""

from .exceptions import StemmerError, PatternCompilationError, InvalidEncodingError
from .preprocess import preprocess
from .rv import RVSplit, locate_rv
from .matcher import ReplaceResult, try_replace
from .stemmer import UkrainianStemmer, stem_word

__all__ = [
    "stem_word",
    "UkrainianStemmer",
    "preprocess",
    "locate_rv",
    "RVSplit",
    "try_replace",
    "ReplaceResult",
    "StemmerError",
    "PatternCompilationError",
    "InvalidEncodingError",
]
