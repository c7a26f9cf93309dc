# -*- coding: utf-8 -*-
"""异常类"""

__all__ = ["NumeralError", "NumeralRangeError"]


class NumeralError(ValueError):
    pass


class NumeralRangeError(NumeralError):
    """The number cannot be written with the given vocabulary."""
