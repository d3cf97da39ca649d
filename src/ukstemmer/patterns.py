"""
Suffix pattern catalog for the Ukrainian stemmer.

Every pattern except RVRE is anchored to the end of the region under test.
The catalog is compiled once on import and shared read-only by all callers
(safe across threads, nothing to tear down).

Sources:
- Vowels: http://uk.wikipedia.org/wiki/Голосний_звук
- Reflexive verbs: http://uk.wikipedia.org/wiki/Рефлексивне_дієслово
- Adjectives: http://uk.wikipedia.org/wiki/Прикметник
- Participles: http://uk.wikipedia.org/wiki/Дієприкметник
- Verbs: http://uk.wikipedia.org/wiki/Дієслово
- Nouns: http://uk.wikipedia.org/wiki/Іменник
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Optional

from .exceptions import PatternCompilationError

logger = logging.getLogger(__name__)

VOWELS = "аеиоуюяіїє"


@dataclass(frozen=True)
class SuffixPattern:
    """Named, precompiled regular expression"""
    name: str
    source: str
    regex: re.Pattern

    def search(self, text: str) -> Optional[re.Match]:
        return self.regex.search(text)


def compile_pattern(name: str, source: str) -> SuffixPattern:
    """
    Compile one catalog entry.

    Raises:
        PatternCompilationError: source is not a valid regular expression
    """
    try:
        regex = re.compile(source)
    except re.error as e:
        logger.error(f"Failed to compile pattern {name}: {e}")
        raise PatternCompilationError(name, source, str(e)) from e
    return SuffixPattern(name=name, source=source, regex=regex)


# Name -> source, in the order the pipeline consults them
PATTERN_SOURCES: Dict[str, str] = {
    "PERFECTIVEGROUND": r"(ив|ивши|ившись|ыв|ывши|ывшись((?<=[ая])(в|вши|вшись)))$",
    "REFLEXIVE": r"(с[яьи])$",
    "ADJECTIVE": (
        r"(ими|ій|ий|а|е|ова|ове|ів|є|їй|єє|еє|я|ім|ем|им|ім|их|іх|ою|йми|іми"
        r"|у|ю|ого|ому|ої)$"
    ),
    "PARTICIPLE": r"(ий|ого|ому|им|ім|а|ій|у|ою|ій|і|их|йми|их)$",
    "VERB": r"(сь|ся|ив|ать|ять|у|ю|ав|али|учи|ячи|вши|ши|е|ме|ати|яти|є)$",
    "NOUN": (
        r"(а|ев|ов|е|ями|ами|еи|и|ей|ой|ий|й|иям|ям|ием|ем|ам|ом|о|у|ах|иях|ях"
        r"|ы|ь|ию|ью|ю|ия|ья|я|і|ові|ї|ею|єю|ою|є|еві|ем|єм|ів|їв|ю)$"
    ),
    "RVRE": f"[{VOWELS}]",
    # Lookbehind plus optional ь: kept literal, see DESIGN.md
    "DERIVATIONAL": f"[^{VOWELS}][{VOWELS}]+[^{VOWELS}]+[{VOWELS}].*(?<=о)сть?$",
    "TRAILING_I": r"и$",
    "OST": r"ость$",
    "SOFT_SIGN": r"ь$",
    "SUPERLATIVE": r"ейше?$",
    "DOUBLE_N": r"нн$",
}


def compile_catalog(sources: Dict[str, str]) -> Dict[str, SuffixPattern]:
    """Compile every source; the first failure aborts the whole catalog."""
    return {name: compile_pattern(name, source) for name, source in sources.items()}


CATALOG: Dict[str, SuffixPattern] = compile_catalog(PATTERN_SOURCES)

PERFECTIVEGROUND = CATALOG["PERFECTIVEGROUND"]
REFLEXIVE = CATALOG["REFLEXIVE"]
ADJECTIVE = CATALOG["ADJECTIVE"]
PARTICIPLE = CATALOG["PARTICIPLE"]
VERB = CATALOG["VERB"]
NOUN = CATALOG["NOUN"]
RVRE = CATALOG["RVRE"]
DERIVATIONAL = CATALOG["DERIVATIONAL"]
TRAILING_I = CATALOG["TRAILING_I"]
OST = CATALOG["OST"]
SOFT_SIGN = CATALOG["SOFT_SIGN"]
SUPERLATIVE = CATALOG["SUPERLATIVE"]
DOUBLE_N = CATALOG["DOUBLE_N"]
