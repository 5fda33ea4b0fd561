"""
Modular arithmetic on unsigned 64-bit words

Every value handed to the public functions must fit in a single machine word. Python integers never overflow, so the
product of two words is formed exactly before it is reduced; this is the widened intermediate used by every modular
multiplication in tonelli.
"""
from tonelli.core import WORD, ModulusError, WordSizeError

__all__ = ["modular_power", "mul_mod", "check_word", "check_modulus"]


def check_word(value: int, name: str = "value") -> int:
    """
    Returns the value if it is an unsigned integer which fits in a word, raises WordSizeError otherwise
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise WordSizeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= WORD.MAX:
        raise WordSizeError(f"{name}={value} outside the unsigned {WORD.BITS}-bit range")
    return value


def check_modulus(modulus: int) -> int:
    """
    Returns the modulus if it is a nonzero word, raises ModulusError for a zero modulus
    """
    check_word(modulus, "modulus")
    if modulus == 0:
        raise ModulusError("Modulus cannot be zero")
    return modulus


def mul_mod(a: int, b: int, modulus: int) -> int:
    """Returns a * b (mod modulus) without truncating the intermediate product."""
    check_word(a, "a")
    check_word(b, "b")
    check_modulus(modulus)
    return (a * b) % modulus


def modular_power(base: int, exponent: int, modulus: int) -> int:
    """
    Returns base^exponent (mod modulus) using right-to-left square-and-multiply.

    The base is reduced once up front. At each step, if the low bit of the exponent is set we multiply the accumulator
    by the current base, then square the base and halve the exponent. An exponent of 0 yields 1 for any base.
    """
    check_word(base, "base")
    check_word(exponent, "exponent")
    check_modulus(modulus)

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1

    return result
