"""
Normalization applied to a word before stemming.

Steps:
1. Lowercase conversion
2. Remove apostrophes (', ’, ʼ all occur in Ukrainian text: "м'ясо", "м’ясо")
3. Fold ё -> е and ъ -> ї
"""

# Typographic forms too, not only ASCII "'"
APOSTROPHES = ("'", "’", "ʼ")

LETTER_FOLDS = (
    ("ё", "е"),
    ("ъ", "ї"),
)


def preprocess(word: str) -> str:
    """
    Normalize a word for stemming.

    Examples:
        >>> preprocess("М'ЯСО")
        'мясо'
        >>> preprocess("ёж")
        'еж'
    """
    word = word.lower()
    for apostrophe in APOSTROPHES:
        word = word.replace(apostrophe, "")
    for letter, canonical in LETTER_FOLDS:
        word = word.replace(letter, canonical)
    return word
