"""
Fixtures used in the tests
"""
import pytest

__all__ = ["SMALL_PRIMES", "LARGE_PRIMES"]

# --- PRIMES --- #
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29,
                31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
                73, 79, 83, 89, 97, 101, 103, 107, 109, 113,
                193, 257, 641, 769, 7681, 12289]

LARGE_PRIMES = [
    1_000_000_007,  # 3 mod 4
    998_244_353,  # 119 * 2^23 + 1
    2 ** 61 - 1,  # Mersenne, 3 mod 4
    2 ** 64 - 2 ** 32 + 1,  # p - 1 = (2^32 - 1) * 2^32
    2 ** 64 - 59,  # largest prime below 2^64
]


@pytest.fixture()
def small_primes():
    return SMALL_PRIMES


@pytest.fixture()
def odd_primes():
    return [p for p in SMALL_PRIMES if p != 2]


@pytest.fixture()
def large_primes():
    return LARGE_PRIMES
