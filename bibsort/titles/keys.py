"""Bibliographic sort keys for English-language titles.

A bibliographic sort ignores a leading article ("the", "a", "an") and reads
a leading number as if it were spelled out, so "The 501st Legion" files
under F and "1917" under N. Characters other than letters and digits are
dropped, except that "&" becomes "and" and hyphens become spaces.

Each cleanup step is its own function; title_key() runs them in order.
"""

import logging
import re
from typing import List

from bibsort.titles.numbers import number_to_words

logger = logging.getLogger(__name__)

ARTICLES = frozenset({'a', 'an', 'the'})

# ASCII digits only, with an optional ordinal suffix ("42nd")
NUMERAL_RE = re.compile(r'^(\d+)(st|nd|rd|th)?$', re.ASCII)


def fold(title: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return title.strip().lower()


def expand_ampersands(text: str) -> str:
    return text.replace('&', ' and ')


def split_hyphens(text: str) -> str:
    return text.replace('-', ' ')


def strip_punctuation(text: str) -> str:
    """Keep letters, numeric characters and whitespace.

    Dropped characters leave no gap: "it's" becomes "its".
    """
    return ''.join(
        ch for ch in text
        if ch.isalpha() or ch.isnumeric() or ch.isspace()
    )


def tokenize(title: str) -> List[str]:
    """Run the character-level cleanup and split into words."""
    text = fold(title)
    text = expand_ampersands(text)
    text = split_hyphens(text)
    text = strip_punctuation(text)
    return text.split()


def drop_article(tokens: List[str]) -> List[str]:
    """Remove a leading article unless it is the whole title."""
    if len(tokens) > 1 and tokens[0] in ARTICLES:
        return tokens[1:]
    return tokens


def spell_leading_number(tokens: List[str]) -> List[str]:
    """Replace a numeric first token with its words.

    "42nd" becomes "forty-second"; "501st" becomes the three words
    "five hundred first". Numbers later in the title are left alone.
    """
    if not tokens:
        return tokens

    match = NUMERAL_RE.match(tokens[0])
    if not match:
        return tokens

    digits, suffix = match.groups()
    try:
        n = int(digits)
    except ValueError:
        # Only reachable past the interpreter's int/str digit limit
        logger.warning("Leaving %d-digit numeral unexpanded", len(digits))
        return tokens

    words = number_to_words(n, ordinal=suffix is not None)
    return words + tokens[1:]


def title_key(title: str) -> str:
    """Convert a title to its bibliographic sort key.

    Args:
        title: Any title string.

    Returns:
        Lowercase, single-space-joined key. A title with nothing left after
        cleanup ("", "...") has the empty key.

    Raises:
        TypeError: If title is not a string.

    Examples:
        >>> title_key("The Gumball Rally")
        'gumball rally'
        >>> title_key("1917")
        'nineteen seventeen'
        >>> title_key("9 to 5")
        'nine to 5'
    """
    if not isinstance(title, str):
        raise TypeError(f"title_key() needs a str, got {type(title).__name__}")

    tokens = tokenize(title)
    if not tokens:
        return ''

    tokens = drop_article(tokens)
    tokens = spell_leading_number(tokens)
    return ' '.join(tokens)


key = title_key
