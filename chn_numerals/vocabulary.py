# -*- coding: utf-8 -*-
"""基本类
中文数字系统 (数字/数位/符号字符表)
内置简体/繁体数字系统及其大写 (支票) 写法
"""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr

from chn_numerals import sanitizer
from chn_numerals.constants import (
    BIG_CHINESE_DIGIS_SIMPLIFIED,
    BIG_CHINESE_DIGIS_TRADITIONAL,
    CHINESE_DIGIS,
    LARGER_CHINESE_NUMERING_UNITS_SIMPLIFIED,
    LARGER_CHINESE_NUMERING_UNITS_TRADITIONAL,
    NEGATIVE,
    ORDINAL,
    POINT,
    SMALLER_BIG_CHINESE_UNITS,
    SMALLER_CHINESE_NUMERING_UNITS,
    VOCABULARY_NAMES,
    ZERO_ALT,
)

__all__ = [
    "Vocabulary",
    "SIMPLIFIED",
    "TRADITIONAL",
    "SIMPLIFIED_FINANCIAL",
    "TRADITIONAL_FINANCIAL",
    "get_vocabulary",
    "resolve_vocabulary",
]


class Vocabulary(BaseModel):
    """
    中文数字系统
    digits: 零 ~ 九, 以及第 11 个字符作为零的另一种写法 (e.g. '〇')
    small_units: 十, 百, 千
    big_units: 万, 亿, 兆, ... 每一个都是前一个的 10^4 倍
    ordinal/point/minus: 第一个字符用于输出, 所有字符都可用于解析
    """

    model_config = ConfigDict(frozen=True)

    digits: tuple[str, ...]
    small_units: tuple[str, ...]
    big_units: tuple[str, ...]
    ordinal: tuple[str, ...]
    point: tuple[str, ...]
    minus: tuple[str, ...]
    name: str = "custom"

    _unit_table: tuple[str, ...] = PrivateAttr(default=())
    _digit_values: dict = PrivateAttr(default_factory=dict)
    _small_unit_powers: dict = PrivateAttr(default_factory=dict)
    _big_unit_powers: dict = PrivateAttr(default_factory=dict)
    _positional_regex: Optional[re.Pattern] = PrivateAttr(default=None)
    _sanitize_rules: tuple = PrivateAttr(default=())

    def model_post_init(self, __context) -> None:
        # "", 十, 百, 千, 万, 十, 百, 千, 亿, ...
        units = [""]
        for big_unit in self.big_units:
            units.extend(self.small_units)
            units.append(big_unit)
        self._unit_table = tuple(units)

        digit_values = {}
        for i, glyph in enumerate(self.digits):
            digit_values.setdefault(glyph, i % 10)
        self._digit_values = digit_values
        self._small_unit_powers = {u: i + 1 for i, u in enumerate(self.small_units)}
        self._big_unit_powers = {u: 4 * (i + 1) for i, u in enumerate(self.big_units)}

        self._positional_regex = re.compile(sanitizer.char_class(self.digits) + "+")
        self._sanitize_rules = sanitizer.compile_rules(self)

    @property
    def unit_table(self) -> tuple[str, ...]:
        return self._unit_table

    @property
    def max_magnitude(self) -> int:
        """Exclusive upper bound of the magnitudes this vocabulary can write."""
        return 10 ** len(self._unit_table)

    @property
    def sanitize_rules(self) -> tuple:
        return self._sanitize_rules

    def digit_value(self, glyph: str) -> Optional[int]:
        return self._digit_values.get(glyph)

    def small_unit_power(self, glyph: str) -> Optional[int]:
        return self._small_unit_powers.get(glyph)

    def big_unit_power(self, glyph: str) -> Optional[int]:
        return self._big_unit_powers.get(glyph)

    def is_zero(self, glyph: str) -> bool:
        return glyph == self.digits[0] or glyph == self.digits[10]

    def is_positional(self, text: str) -> bool:
        """True if `text` only consists of digit glyphs (no units)."""
        return self._positional_regex.fullmatch(text) is not None

    def strip_prefix(self, text: str, markers) -> tuple[str, bool]:
        for marker in markers:
            if text.startswith(marker):
                return text[len(marker) :], True
        return text, False


SIMPLIFIED = Vocabulary(
    name="simplified",
    digits=tuple(CHINESE_DIGIS) + (ZERO_ALT,),
    small_units=tuple(SMALLER_CHINESE_NUMERING_UNITS),
    big_units=tuple(LARGER_CHINESE_NUMERING_UNITS_SIMPLIFIED),
    ordinal=tuple(ORDINAL),
    point=(POINT[0], "."),
    minus=(NEGATIVE[0], "-"),
)

TRADITIONAL = Vocabulary(
    name="traditional",
    digits=tuple(CHINESE_DIGIS) + (ZERO_ALT,),
    small_units=tuple(SMALLER_CHINESE_NUMERING_UNITS),
    big_units=tuple(LARGER_CHINESE_NUMERING_UNITS_TRADITIONAL),
    ordinal=tuple(ORDINAL),
    point=(POINT[1], "."),
    minus=(NEGATIVE[1], "-"),
)

# 大写数字, 保留 big_units/point/minus
SIMPLIFIED_FINANCIAL = Vocabulary(
    **{
        **SIMPLIFIED.model_dump(),
        "name": "simplified_financial",
        "digits": tuple(BIG_CHINESE_DIGIS_SIMPLIFIED) + (ZERO_ALT,),
        "small_units": tuple(SMALLER_BIG_CHINESE_UNITS),
    }
)

TRADITIONAL_FINANCIAL = Vocabulary(
    **{
        **TRADITIONAL.model_dump(),
        "name": "traditional_financial",
        "digits": tuple(BIG_CHINESE_DIGIS_TRADITIONAL) + (ZERO_ALT,),
        "small_units": tuple(SMALLER_BIG_CHINESE_UNITS),
    }
)

_REGISTRY = dict(
    zip(
        VOCABULARY_NAMES,
        [SIMPLIFIED, TRADITIONAL, SIMPLIFIED_FINANCIAL, TRADITIONAL_FINANCIAL],
    )
)


def get_vocabulary(name: str) -> Vocabulary:
    """
    根据名称返回内置数字系统
    VOCABULARY_NAMES = ['simplified', 'traditional',
                        'simplified_financial', 'traditional_financial']
    """
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        raise ValueError(
            "Vocabulary name should be in {0} ({1} provided).".format(
                VOCABULARY_NAMES, name
            )
        ) from None


def resolve_vocabulary(
    vocabulary: Union[Vocabulary, str, None], default: Vocabulary = TRADITIONAL
) -> Vocabulary:
    if vocabulary is None:
        return default
    if isinstance(vocabulary, str):
        return get_vocabulary(vocabulary)
    if not isinstance(vocabulary, Vocabulary):
        raise TypeError(
            "Expected a Vocabulary or vocabulary name, got {0}".format(
                type(vocabulary).__name__
            )
        )
    return vocabulary
