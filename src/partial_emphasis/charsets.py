"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: CommonMark 0.31.2 specification

"""

import unicodedata

# CommonMark: ASCII punctuation characters
# https://spec.commonmark.org/0.31.2/#ascii-punctuation-character
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Narrow punctuation class used when Unicode categories are disabled:
# ASCII punctuation, inverted exclamation mark, and U+2010..U+2027
NARROW_PUNCTUATION: frozenset[str] = (
    ASCII_PUNCTUATION
    | frozenset("\xa1")
    | frozenset(chr(c) for c in range(0x2010, 0x2028))
)

# ASCII whitespace plus the line/paragraph separators and BOM
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v\u2028\u2029\ufeff")

# Emphasis marker characters: "*" is symmetric, "_" is word-boundary sensitive
ASTERISK = "*"
UNDERSCORE = "_"
EMPHASIS_MARKERS: frozenset[str] = frozenset((ASTERISK, UNDERSCORE))


def is_unicode_punctuation(char: str) -> bool:
    """Check if character is Unicode punctuation (P* or S* categories).

    This includes ASCII punctuation as a subset.

    """
    if not char:
        return False
    if char in ASCII_PUNCTUATION:
        return True
    cat = unicodedata.category(char)
    return cat.startswith("P") or cat.startswith("S")


def is_punctuation(char: str, *, unicode: bool = True) -> bool:
    """Check if character counts as punctuation for flanking rules."""
    if unicode:
        return is_unicode_punctuation(char)
    return char in NARROW_PUNCTUATION


def is_whitespace_or_boundary(char: str) -> bool:
    """Check if character is whitespace, or empty (a region boundary).

    Includes ASCII whitespace and Unicode category Zs (space separator).

    """
    if not char:
        return True
    if char in WHITESPACE:
        return True
    return unicodedata.category(char) == "Zs"
