from loguru import logger

from .decoder import from_words
from .detect import is_financial_chinese, is_simplified_chinese, is_traditional_chinese
from .encoder import to_ordinal, to_positional_words, to_words, to_words_ordinal
from .exceptions import NumeralError, NumeralRangeError
from .sanitizer import sanitize
from .vocabulary import (
    SIMPLIFIED,
    SIMPLIFIED_FINANCIAL,
    TRADITIONAL,
    TRADITIONAL_FINANCIAL,
    Vocabulary,
    get_vocabulary,
)

# Library logging is opt-in: logger.enable("chn_numerals")
logger.disable(__name__)

__all__ = [
    "to_words",
    "to_words_ordinal",
    "to_ordinal",
    "to_positional_words",
    "from_words",
    "is_simplified_chinese",
    "is_traditional_chinese",
    "is_financial_chinese",
    "sanitize",
    "Vocabulary",
    "SIMPLIFIED",
    "TRADITIONAL",
    "SIMPLIFIED_FINANCIAL",
    "TRADITIONAL_FINANCIAL",
    "get_vocabulary",
    "NumeralError",
    "NumeralRangeError",
]
