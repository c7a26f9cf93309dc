import math
import os
import sys

import pytest

# Ensure project root is on sys.path for module imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from chn_numerals import SIMPLIFIED, TRADITIONAL, Vocabulary, from_words
from chn_numerals.decoder import (
    decode_fraction,
    decode_integer,
    decode_plain,
    decode_positional,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("十", 10),
        ("十五", 15),
        ("二十三", 23),
        ("一百零五", 105),
        ("一百一十", 110),
        ("一萬零一", 10001),
        ("十萬", 100000),
        ("一千萬", 10000000),
        ("一千零五萬", 10050000),
        ("一千一百萬一千", 11001000),
        ("一億零一千", 100001000),
        ("一億二千三百四十五萬六千七百八十九", 123456789),
        ("負五", -5),
        ("-五", -5),
        ("負一萬零一", -10001),
        ("第三", 3),
        ("第二十", 20),
    ],
)
def test_from_words(text, expected):
    assert from_words(text) == expected


def test_from_words_empty_and_invalid():
    assert from_words("") == 0
    assert math.isnan(from_words("abc"))
    assert math.isnan(from_words(None))
    assert math.isnan(from_words(12))
    assert math.isnan(from_words("一百十"))
    assert math.isnan(from_words("第"))


@pytest.mark.parametrize("text", ["萬", "萬五", "五萬萬", "億萬", "一萬億萬"])
def test_big_unit_without_digit_is_invalid(text):
    assert math.isnan(from_words(text))


def test_big_unit_closing_a_group():
    assert from_words("二十萬") == 200000
    assert from_words("一千零二十萬") == 10200000
    assert from_words("三百萬零五") == 3000005


def test_arabic_literals():
    assert from_words("3.14") == 3.14
    assert from_words("-12") == -12
    assert from_words("12.") == 12
    assert isinstance(from_words("12."), int)
    assert from_words("第3") == 3
    assert decode_plain("三") is None


def test_arabic_literal_longer_than_int_conversion_limit():
    assert from_words("1" * 5000) > 10**4000
    assert from_words("-" + "9" * 5000) < -(10**4000)


def test_positional_numerals():
    assert from_words("二〇二四") == 2024
    assert from_words("一二三") == 123
    assert from_words("零") == 0
    assert decode_positional("一九八四", TRADITIONAL) == 1984
    assert decode_positional("一百", TRADITIONAL) is None


def test_decimals():
    assert from_words("三點一四") == pytest.approx(3.14)
    assert from_words("三.14") == pytest.approx(3.14)
    assert from_words("三點〇五") == pytest.approx(3.05)
    assert from_words("負一點五") == -1.5
    assert from_words("負零點五") == -0.5
    assert from_words("一點") == 1
    assert math.isnan(from_words("一點五x"))


def test_decode_fraction_sign_is_independent():
    assert decode_fraction("負零點五", TRADITIONAL) == -0.5
    assert decode_fraction("零點五", TRADITIONAL) == 0.5
    assert decode_fraction("五", TRADITIONAL) == 0.0
    assert decode_fraction("五點", TRADITIONAL) == 0.0
    assert decode_fraction("負五點25", TRADITIONAL) == -0.25


def test_decode_integer_ignores_decimals():
    assert decode_integer("十二點五", TRADITIONAL) == 12
    assert decode_integer("負十二點五", TRADITIONAL) == -12
    assert math.isnan(decode_integer("點五", TRADITIONAL))


def test_simplified_text():
    assert from_words("一万零一") == 10001
    assert from_words("负三点五") == -3.5
    assert from_words("一万", SIMPLIFIED) == 10000
    assert from_words("一万", "simplified") == 10000
    assert math.isnan(from_words("一万", TRADITIONAL))


def test_financial_text():
    assert from_words("壹拾貳") == 12
    assert from_words("拾") == 10
    assert from_words("贰拾") == 20
    assert from_words("貳仟參佰零伍") == 2305


def test_custom_vocabulary():
    vocabulary = Vocabulary(
        digits=list("0123456789o"),
        small_units=["t", "h", "k"],
        big_units=["W"],
        ordinal=["#"],
        point=["."],
        minus=["~"],
    )
    assert from_words("1W2k3h4t5", vocabulary) == 12345
    assert from_words("t", vocabulary) == 10
    assert from_words("~7.5", vocabulary) == -7.5
    assert from_words("#3", vocabulary) == 3
