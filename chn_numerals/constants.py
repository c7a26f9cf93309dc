# -*- coding: utf-8 -*-
"""基本常量
中文数字/数位/符号字符常量
"""

CHINESE_DIGIS = "零一二三四五六七八九"
BIG_CHINESE_DIGIS_SIMPLIFIED = "零壹贰叁肆伍陆柒捌玖"
BIG_CHINESE_DIGIS_TRADITIONAL = "零壹貳參肆伍陸柒捌玖"
SMALLER_CHINESE_NUMERING_UNITS = "十百千"
SMALLER_BIG_CHINESE_UNITS = "拾佰仟"
LARGER_CHINESE_NUMERING_UNITS_SIMPLIFIED = "万亿兆京垓秭穰沟涧正载"
LARGER_CHINESE_NUMERING_UNITS_TRADITIONAL = "萬億兆京垓秭穰溝澗正載"

ZERO_ALT = "〇"

ORDINAL = ["第"]
NEGATIVE = ["负", "負"]
POINT = ["点", "點"]

# 仅出现在某一种写法中的字符, 用于猜测繁/简体
TRADITIONAL_ONLY_CHARS = "萬億點負溝澗載貳參陸"
SIMPLIFIED_ONLY_CHARS = "万亿点负沟涧载贰叁陆"
# 大写数字 (支票写法) 专用字符
FINANCIAL_ONLY_CHARS = "壹贰貳叁參肆伍陆陸柒捌玖拾佰仟"

# 内置数字系统名称
VOCABULARY_NAMES = [
    "simplified",
    "traditional",
    "simplified_financial",
    "traditional_financial",
]
