# -*- coding: utf-8 -*-
"""规范化
将逐位拼接的中文数字 (e.g. 一万零千零百零十一) 规范为标准写法 (一万零一)
"""

import re

__all__ = ["char_class", "compile_rules", "sanitize"]


def char_class(glyphs) -> str:
    return "[" + "".join(re.escape(g) for g in glyphs) + "]"


def compile_rules(vocabulary):
    """
    Build the ordered patterns used by `sanitize` for `vocabulary`.
    """
    zeros = char_class([vocabulary.digits[0], vocabulary.digits[10]])
    small = char_class(vocabulary.small_units)
    big = char_class(vocabulary.big_units)

    return (
        # 零千, 零百, 零十 -> 零
        re.compile(zeros + small),
        # 亿零万 -> 亿零, 兆零亿零万 -> 兆零
        re.compile("(" + big + ")(?:" + zeros + "+" + big + ")+"),
        # 十零万 -> 十万
        re.compile("(" + small + ")" + zeros + "+(" + big + ")"),
        # 零一百 -> 一百
        re.compile("^" + zeros + "+(?=.)", re.S),
        # 零零零 -> 零
        re.compile(zeros + "+"),
        re.compile(zeros + r"+\Z"),
    )


def sanitize(text: str, vocabulary) -> str:
    """
    Normalize numeral text to its canonical form.

    Redundant zeros are collapsed, tiers holding only zeros are removed and
    trailing zeros stripped. Zero itself is never stripped to an empty string.
    A zero between two digits marks the gap and is kept, so 一百零十一 becomes
    一百零一 (101), not 一百一 (110 read colloquially). Applying it to canonical
    text returns the same text.
    """
    zero = vocabulary.digits[0]
    (
        zero_unit,
        empty_tiers,
        zero_before_big,
        leading_zeros,
        zero_runs,
        trailing_zeros,
    ) = vocabulary.sanitize_rules

    text = zero_unit.sub(lambda m: zero, text)
    text = empty_tiers.sub(lambda m: m.group(1) + zero, text)
    text = zero_before_big.sub(lambda m: m.group(1) + m.group(2), text)
    text = leading_zeros.sub("", text)
    text = zero_runs.sub(lambda m: zero, text)

    # Remove tailing zero but not zero itself.
    if len(text) > 1:
        text = trailing_zeros.sub("", text)

    return text
