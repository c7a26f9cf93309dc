import os
import sys
from random import Random

import pytest

# Ensure project root is on sys.path for module imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from chn_numerals import (
    SIMPLIFIED,
    SIMPLIFIED_FINANCIAL,
    TRADITIONAL,
    TRADITIONAL_FINANCIAL,
    from_words,
    to_words,
)

VOCABULARIES = [SIMPLIFIED, TRADITIONAL, SIMPLIFIED_FINANCIAL, TRADITIONAL_FINANCIAL]


def _sample(seed: int, count: int = 2000):
    rng = Random(seed)
    numbers = [rng.randint(-(10**8), 10**8) for _ in range(count)]
    # Sparse numbers exercise the zero handling between tiers
    for _ in range(count):
        digits = [rng.choice("0000000123456789") for _ in range(rng.randint(1, 9))]
        numbers.append(int("".join(digits)))
    return numbers + [10**8, -(10**8)]


@pytest.mark.parametrize("vocabulary", VOCABULARIES, ids=lambda v: v.name)
def test_round_trip_dense(vocabulary):
    for n in range(-1000, 20001):
        assert from_words(to_words(n, vocabulary), vocabulary) == n


@pytest.mark.parametrize("vocabulary", VOCABULARIES, ids=lambda v: v.name)
def test_round_trip_sample(vocabulary):
    for n in _sample(seed=len(vocabulary.name)):
        assert from_words(to_words(n, vocabulary)) == n


@pytest.mark.parametrize("vocabulary", [SIMPLIFIED, TRADITIONAL], ids=lambda v: v.name)
def test_round_trip_cheque(vocabulary):
    for n in range(0, 2000):
        assert from_words(to_words(n, vocabulary, cheque=True)) == n


def test_round_trip_big_units():
    for power in range(0, 45):
        n = 10**power
        assert from_words(to_words(n)) == n
        assert from_words(to_words(n + 1)) == n + 1
        assert from_words(to_words(3 * n + 7)) == 3 * n + 7


def test_round_trip_decimals():
    for value in [0.5, 3.14, -2.75, 10.01, 12345.678]:
        assert from_words(to_words(value)) == pytest.approx(value)
        assert from_words(to_words(value, SIMPLIFIED)) == pytest.approx(value)
