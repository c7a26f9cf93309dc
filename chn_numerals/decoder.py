# -*- coding: utf-8 -*-
"""中文字符串 => 数字 方法
依次尝试: 阿拉伯数字, 逐位读法 (一二三), 完整的数位语法 (一百二十三)
解析失败时返回 NaN, 不抛出异常
"""

import math
import re
from typing import Optional, Union

from loguru import logger

from chn_numerals.detect import guess_vocabulary
from chn_numerals.sanitizer import sanitize
from chn_numerals.vocabulary import Vocabulary, resolve_vocabulary

__all__ = [
    "decode_plain",
    "decode_positional",
    "decode_integer",
    "decode_fraction",
    "from_words",
]

PURE_DIGITS_REGEX = re.compile(r"-?[0-9]+(\.(?P<decimals>[0-9]*))?")
ASCII_DIGITS_REGEX = re.compile(r"[0-9]+")


def decode_plain(text: str) -> Union[int, float, None]:
    """Arabic literal such as "-12", "12." or "3.14", None otherwise."""
    match = PURE_DIGITS_REGEX.fullmatch(text)
    if match is None:
        return None

    if match.group("decimals"):
        return float(text)
    try:
        return int(text.rstrip("."))
    except ValueError:
        # Longer than the int string conversion limit
        return float(text)


def decode_positional(text: str, vocabulary: Vocabulary) -> Optional[int]:
    """Digit glyphs without units read as place values, 二〇二四 -> 2024."""
    if not vocabulary.is_positional(text):
        return None

    value = 0
    for glyph in text:
        value = value * 10 + vocabulary.digit_value(glyph)
    return value


def _skip_zeros(text: str, index: int, vocabulary: Vocabulary) -> int:
    while index < len(text) and vocabulary.is_zero(text[index]):
        index += 1
    return index


def _find_big_unit(text: str, start: int, vocabulary: Vocabulary) -> int:
    """
    Look ahead from `start` for the big unit closing the current tier.

    At most two (digit, small unit) groups and one digit may sit in front of
    it, e.g. 一千[二百三十四]万. Returns the big unit's power of ten, 0 if the
    tier is not closed by one.
    """
    index = start
    groups = 0
    while groups < 2:
        index = _skip_zeros(text, index, vocabulary)
        if (
            index + 1 < len(text)
            and vocabulary.digit_value(text[index]) is not None
            and vocabulary.small_unit_power(text[index + 1]) is not None
        ):
            index += 2
            groups += 1
        else:
            break

    index = _skip_zeros(text, index, vocabulary)
    if index < len(text) and vocabulary.digit_value(text[index]) is not None:
        index += 1

    if index < len(text):
        return vocabulary.big_unit_power(text[index]) or 0
    return 0


def decode_integer(text: str, vocabulary: Vocabulary) -> Union[int, float]:
    """
    Parse the integer part of `text` with the digit/unit grammar.

    Anything from the first point marker on is ignored. Returns NaN if the
    text is not a numeral.
    """
    digits = vocabulary.digits

    # Remove any decimals if found.
    for point in vocabulary.point:
        point_index = text.find(point)
        if point_index != -1:
            text = text[:point_index]
            break

    text, is_negative = vocabulary.strip_prefix(text, vocabulary.minus)

    text = sanitize(text, vocabulary)
    if not text:
        logger.debug("No integer part to decode")
        return math.nan

    if text == digits[0]:
        return 0

    # 十二 -> 一十二
    if text.startswith(vocabulary.small_units[0]):
        text = digits[1] + text

    num = 0
    index = 0
    while index < len(text):
        char = text[index]
        value = vocabulary.digit_value(char)
        if value is None:
            # Big unit already applied by the lookahead of the small unit before it
            if (
                vocabulary.big_unit_power(char) is not None
                and index > 0
                and vocabulary.small_unit_power(text[index - 1]) is not None
            ):
                index += 1
                continue

            logger.debug("Unrecognized glyph {!r} in {!r}", char, text)
            return math.nan

        if index + 1 == len(text):
            num += value
            break

        next_char = text[index + 1]
        if value == 0 and vocabulary.digit_value(next_char) is not None:
            # 零 only marks a gap, e.g. 一万零一
            index += 1
            continue

        power = vocabulary.small_unit_power(next_char)
        if power is not None:
            power += _find_big_unit(text, index + 2, vocabulary)
            num += value * 10**power
            index += 2
            continue

        power = vocabulary.big_unit_power(next_char)
        if power is not None:
            num += value * 10**power
            index += 2
            continue

        logger.debug("Unexpected {!r} after {!r} in {!r}", next_char, char, text)
        return math.nan

    return -num if is_negative else num


def decode_fraction(text: str, vocabulary: Vocabulary) -> float:
    """
    Parse the digits after the first point marker, 三点一四 -> 0.14.

    The sign is taken from a leading minus marker of `text`, so 负零点五 gives
    -0.5. Returns 0.0 without a point marker and NaN for unknown glyphs.
    """
    _, is_negative = vocabulary.strip_prefix(text, vocabulary.minus)

    for point in vocabulary.point:
        point_index = text.find(point)
        if point_index == -1:
            continue

        decimals = text[point_index + len(point) :]
        if not decimals:
            return 0.0

        if ASCII_DIGITS_REGEX.fullmatch(decimals) is None:
            values = []
            for char in decimals:
                value = vocabulary.digit_value(char)
                if value is None:
                    logger.debug("Unrecognized decimal glyph {!r} in {!r}", char, text)
                    return math.nan
                values.append(str(value))
            decimals = "".join(values)

        value = float("0." + decimals)
        return -value if is_negative else value

    return 0.0


def from_words(
    text: str, vocabulary: Union[Vocabulary, str, None] = None
) -> Union[int, float]:
    """
    Convert a stringified number, regardless of how it's written, to a number.

    Args:
        text: numeral text, e.g. "一萬零一", "第三", "二〇二四" or "3.14"
        vocabulary: Vocabulary or built-in vocabulary name; guessed from the
            text when omitted

    Returns:
        int, or float when the text has decimals. NaN if `text` is not a
        string or cannot be parsed; 0 for an empty string.
    """
    if not isinstance(text, str):
        logger.debug("Cannot decode {!r}", text)
        return math.nan

    if not text:
        return 0

    if vocabulary is None:
        vocabulary = guess_vocabulary(text)
    else:
        vocabulary = resolve_vocabulary(vocabulary)

    text, _ = vocabulary.strip_prefix(text, vocabulary.ordinal)

    value = decode_plain(text)
    if value is not None:
        return value

    value = decode_positional(text, vocabulary)
    if value is not None:
        return value

    num = decode_integer(text, vocabulary)
    decimals = decode_fraction(text, vocabulary)
    if decimals:
        return num + decimals
    return num
