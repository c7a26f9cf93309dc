# -*- coding: utf-8 -*-
"""数字 => 中文字符串 方法
基数 (cardinal), 序数 (ordinal), 负数, 小数, 支票写法
"""

import math
import numbers
from decimal import Decimal
from typing import Union

from chn_numerals.exceptions import NumeralRangeError
from chn_numerals.sanitizer import sanitize
from chn_numerals.vocabulary import Vocabulary, resolve_vocabulary

__all__ = [
    "encode_magnitude",
    "encode_fraction",
    "to_words",
    "to_words_ordinal",
    "to_ordinal",
    "to_positional_words",
]

Number = Union[int, float, Decimal]
VocabularyLike = Union[Vocabulary, str, None]


def _check_number(number) -> None:
    if isinstance(number, bool) or not isinstance(number, (numbers.Real, Decimal)):
        raise TypeError(
            "Expected an int, float or Decimal, got {0}".format(type(number).__name__)
        )
    if not isinstance(number, int) and not math.isfinite(number):
        raise NumeralRangeError("Cannot write {0!r} as a numeral".format(number))


def _plain_string(number) -> str:
    """Decimal string of `number`, never in scientific notation."""
    if isinstance(number, int):
        return str(number)
    if isinstance(number, float):
        text = repr(number)
    elif isinstance(number, Decimal):
        text = str(number)
    else:
        text = repr(float(number))

    if "e" in text.lower():
        text = format(Decimal(text), "f")
    return text


def _split(number):
    """Split `number` into (integer digits, fraction digits), both unsigned."""
    text = _plain_string(number).lstrip("-")
    int_part, _, dec_part = text.partition(".")
    return int_part, dec_part.rstrip("0")


def encode_magnitude(
    magnitude: int, vocabulary: Vocabulary, cheque: bool = False
) -> str:
    """
    Write a non-negative integer with digits and units, e.g. 110 -> 一百一十.

    In cheque mode the leading 一 of 10-19 is kept (一十二 instead of 十二).
    """
    digits = vocabulary.digits
    if magnitude == 0:
        return digits[0]

    if magnitude >= vocabulary.max_magnitude:
        raise NumeralRangeError(
            "{0} is too large for vocabulary {1!r} (limit 10^{2})".format(
                magnitude, vocabulary.name, len(vocabulary.unit_table)
            )
        )

    units = vocabulary.unit_table
    parts = []
    position = 0
    while magnitude > 0:
        magnitude, value = divmod(magnitude, 10)
        parts.append(digits[value] + units[position])
        position += 1

    text = sanitize("".join(reversed(parts)), vocabulary)

    # ^10, 11, .., 19
    if not cheque:
        ten = digits[1] + vocabulary.small_units[0]
        if text.startswith(ten):
            text = text[len(digits[1]) :]

    return text


def encode_fraction(number: Number, vocabulary: Vocabulary) -> str:
    """
    Read the fractional digits one by one after the point marker, 0.05 -> 点〇五.
    Returns an empty string for integral numbers.
    """
    _, dec_part = _split(number)
    if not dec_part:
        return ""

    digits = vocabulary.digits
    text = "".join(digits[10] if c == "0" else digits[int(c)] for c in dec_part)
    return vocabulary.point[0] + text


def to_words(
    number: Number, vocabulary: VocabularyLike = None, cheque: bool = False
) -> str:
    """
    Converts the number to its Chinese numeral form.

    Args:
        number: int, float or Decimal to convert
        vocabulary: Vocabulary or built-in vocabulary name, defaults to traditional
        cheque: keep the leading 一 of 10-19

    Returns:
        The numeral text, e.g. to_words(-10001) == "負一萬零一"
    """
    vocabulary = resolve_vocabulary(vocabulary)
    _check_number(number)

    int_part, _ = _split(number)
    text = encode_magnitude(int(int_part), vocabulary, cheque)
    text += encode_fraction(number, vocabulary)

    if number < 0:
        text = vocabulary.minus[0] + text
    return text


def to_words_ordinal(
    number: Number, vocabulary: VocabularyLike = None, cheque: bool = False
) -> str:
    """Same as `to_words`, prefixed with the ordinal marker (第三)."""
    vocabulary = resolve_vocabulary(vocabulary)
    return vocabulary.ordinal[0] + to_words(number, vocabulary, cheque)


def to_ordinal(number: Number, vocabulary: VocabularyLike = None) -> str:
    """Ordinal marker followed by the number in Arabic digits (第3)."""
    vocabulary = resolve_vocabulary(vocabulary)
    _check_number(number)
    return vocabulary.ordinal[0] + _plain_string(number)


def to_positional_words(
    value: Union[int, str], vocabulary: VocabularyLike = None
) -> str:
    """
    Read a number digit by digit without units, 2016 -> 二零一六.
    """
    vocabulary = resolve_vocabulary(vocabulary)
    text = str(value)
    if not (text.isascii() and text.isdigit()):
        raise ValueError(
            "Expected a non-negative integer or digit string, got {0!r}".format(value)
        )
    return "".join(vocabulary.digits[int(c)] for c in text)
