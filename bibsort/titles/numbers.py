"""Spell out non-negative integers as English words.

Cardinal ("forty-two") and ordinal ("forty-second") forms, with years
between 1100 and 2999 read the way people say them ("nineteen seventeen").

The result is a list of words so callers can splice it into a token list.
Numbers from 21 to 99 come back as a single hyphenated word; scale words
("hundred", "thousand", "million", "billion") are separate elements:

    >>> number_to_words(42, ordinal=True)
    ['forty-second']
    >>> number_to_words(501, ordinal=True)
    ['five', 'hundred', 'first']
"""

from typing import List

ONES = (
    'zero', 'one', 'two', 'three', 'four',
    'five', 'six', 'seven', 'eight', 'nine',
    'ten', 'eleven', 'twelve', 'thirteen', 'fourteen',
    'fifteen', 'sixteen', 'seventeen', 'eighteen', 'nineteen',
)

# Index is n // 10
TENS = (
    '', '', 'twenty', 'thirty', 'forty',
    'fifty', 'sixty', 'seventy', 'eighty', 'ninety',
)

# 4, 6 and 7 are regular ("fourth") and take the plain suffix
IRREGULAR_ORDINALS = {
    0: 'zeroth',
    1: 'first',
    2: 'second',
    3: 'third',
    5: 'fifth',
    8: 'eighth',
    9: 'ninth',
}

TENS_ORDINALS = {
    20: 'twentieth',
    30: 'thirtieth',
    40: 'fortieth',
    50: 'fiftieth',
    60: 'sixtieth',
    70: 'seventieth',
    80: 'eightieth',
    90: 'ninetieth',
}

ORDINAL_SUFFIX = 'th'

# (divisor, scale word), largest first; billions absorb everything above
SCALES = (
    (1_000_000_000, 'billion'),
    (1_000_000, 'million'),
    (1_000, 'thousand'),
)

YEAR_RANGE = range(1100, 3000)
# Read as "two thousand five", not "twenty hundred five"
YEAR_GAP = range(2000, 2010)


def _hundred_takes_suffix(remainder: int) -> bool:
    """'hundred' itself becomes 'hundredth' only with nothing after it."""
    return remainder == 0


def _scale_takes_suffix(n: int) -> bool:
    """Thousand/million/billion: the last word gets 'th' on round hundreds."""
    return n % 100 == 0


def _is_year(n: int) -> bool:
    return n in YEAR_RANGE and n not in YEAR_GAP


def number_to_words(n: int, ordinal: bool = False) -> List[str]:
    """Spell out a non-negative integer.

    Args:
        n: The number. Anything past the billions recurses on the billions
           group ("one thousand billion").
        ordinal: Produce the ranking form ("second") instead of the counting
                 form ("two"). Only the final word carries the suffix.

    Returns:
        Lowercase words, one list element per space-separated word.

    Raises:
        TypeError: If n is not an int (bool is rejected too).
        ValueError: If n is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"number_to_words() needs an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"number_to_words() needs a non-negative int, got {n}")
    return _spell(n, ordinal)


def _spell(n: int, ordinal: bool) -> List[str]:
    if ordinal and n < 10:
        word = IRREGULAR_ORDINALS.get(n)
        if word is None:
            word = ONES[n] + ORDINAL_SUFFIX
        return [word]

    if n < 20:
        word = ONES[n]
        if ordinal:
            # 0-9 never get here
            word += ORDINAL_SUFFIX
        return [word]

    if ordinal and n in TENS_ORDINALS:
        return [TENS_ORDINALS[n]]

    if n < 100:
        word = TENS[n // 10]
        ones = n % 10
        if ones:
            word += '-' + _spell(ones, ordinal)[0]
        return [word]

    if n < 1000:
        hundreds, remainder = divmod(n, 100)
        words = _spell(hundreds, False) + ['hundred']
        if remainder:
            words += _spell(remainder, ordinal)
        if ordinal and _hundred_takes_suffix(remainder):
            words[-1] += ORDINAL_SUFFIX
        return words

    if not ordinal and _is_year(n):
        century, remainder = divmod(n, 100)
        words = _spell(century, False)
        if remainder < 10:
            words.append('hundred')
        if remainder:
            words += _spell(remainder, False)
        return words

    for divisor, scale in SCALES:
        if n >= divisor:
            break
    group, remainder = divmod(n, divisor)
    words = _spell(group, False) + [scale]
    if remainder:
        words += _spell(remainder, ordinal)
    if ordinal and _scale_takes_suffix(n):
        words[-1] += ORDINAL_SUFFIX
    return words
