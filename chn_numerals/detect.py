# -*- coding: utf-8 -*-
"""繁/简体猜测
只检查是否出现某一种写法独有的字符, 不做完整的语言识别
"""

from loguru import logger

from chn_numerals.constants import (
    FINANCIAL_ONLY_CHARS,
    SIMPLIFIED_ONLY_CHARS,
    TRADITIONAL_ONLY_CHARS,
)
from chn_numerals.vocabulary import (
    SIMPLIFIED,
    SIMPLIFIED_FINANCIAL,
    TRADITIONAL,
    TRADITIONAL_FINANCIAL,
    Vocabulary,
)

__all__ = [
    "is_simplified_chinese",
    "is_traditional_chinese",
    "is_financial_chinese",
    "guess_vocabulary",
]


def is_simplified_chinese(text: str) -> bool:
    """True if `text` contains a glyph only used by Simplified numerals (万, 点, 贰, ...)."""
    return any(c in SIMPLIFIED_ONLY_CHARS for c in text)


def is_traditional_chinese(text: str) -> bool:
    """True if `text` contains a glyph only used by Traditional numerals (萬, 點, 貳, ...)."""
    return any(c in TRADITIONAL_ONLY_CHARS for c in text)


def is_financial_chinese(text: str) -> bool:
    return any(c in FINANCIAL_ONLY_CHARS for c in text)


def guess_vocabulary(text: str) -> Vocabulary:
    # Ambiguous input (neither or both) is read as Traditional
    simplified = is_simplified_chinese(text) and not is_traditional_chinese(text)
    if is_financial_chinese(text):
        vocabulary = SIMPLIFIED_FINANCIAL if simplified else TRADITIONAL_FINANCIAL
    else:
        vocabulary = SIMPLIFIED if simplified else TRADITIONAL

    logger.debug("Guessed vocabulary {} for {!r}", vocabulary.name, text)
    return vocabulary
