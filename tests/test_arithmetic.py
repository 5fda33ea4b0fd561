"""
Tests for square-and-multiply modular exponentiation and the word-size checks
"""
import random
from secrets import randbits

import pytest

from tonelli.arithmetic import modular_power, mul_mod, check_word
from tonelli.core import WORD, ModulusError, WordSizeError


def test_modular_power_known_values():
    assert modular_power(2, 10, 1000) == 24
    assert modular_power(3, 5, 7) == 5
    assert modular_power(2, 0, 7) == 1
    assert modular_power(0, 5, 7) == 0


def test_identity_exponent():
    for m in range(1, 64):
        x = random.randint(0, WORD.MAX)
        assert modular_power(x, 0, m) == 1, f"x^0 mod {m} should be 1"


def test_zero_base():
    for m in range(2, 64):
        assert modular_power(0, random.randint(1, 1000), m) == 0


def test_modular_power_against_builtin(large_primes):
    for _ in range(50):
        base = randbits(WORD.BITS)
        exponent = randbits(WORD.BITS)
        modulus = random.choice(large_primes + [random.randint(2, WORD.MAX)])
        assert modular_power(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mul_mod_does_not_truncate():
    p = 2 ** 64 - 59
    # 2^64 - 1 = 58 (mod p)
    assert mul_mod(WORD.MAX, WORD.MAX, p) == 58 * 58
    assert mul_mod(WORD.MAX, WORD.MAX, WORD.MAX) == 0


def test_zero_modulus():
    with pytest.raises(ModulusError):
        modular_power(2, 10, 0)
    with pytest.raises(ModulusError):
        mul_mod(2, 3, 0)


@pytest.mark.parametrize("value", [-1, WORD.MAX + 1, 2 ** 100, 1.5, "7", None, True])
def test_word_size_rejected(value):
    with pytest.raises(WordSizeError):
        check_word(value)
    with pytest.raises(WordSizeError):
        modular_power(value, 2, 7)


def test_word_bounds_accepted():
    assert check_word(0) == 0
    assert check_word(WORD.MAX) == WORD.MAX
