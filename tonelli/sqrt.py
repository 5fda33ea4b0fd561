"""
Square roots modulo an odd prime

square_root returns one r with r^2 = n (mod p) or None when n is a quadratic non-residue. square_roots returns both
roots in ascending order. Neither function tests p for primality.
"""
from typing import Optional, Tuple

from tonelli.arithmetic import check_modulus, check_word, modular_power, mul_mod
from tonelli.core import ModulusError, get_logger
from tonelli.residues import find_non_residue, legendre_symbol

__all__ = ["tonelli_shanks", "square_root", "square_roots"]

logger = get_logger(__name__)


def tonelli_shanks(n: int, prime: int) -> Optional[int]:
    """
    Runs the Tonelli-Shanks reduction for an odd prime and returns r such that r^2 = n (mod prime).

    n is expected to be a quadratic residue; n = 0 (mod prime) returns 0. For a non-residue the search for i below
    runs into m and we return None. This also covers primes with prime = 3 (mod 4), where s = 1 and the loop is never entered.
    """
    check_word(n, "n")
    check_modulus(prime)
    if prime < 3 or prime % 2 == 0:
        raise ModulusError(f"Tonelli-Shanks requires an odd prime, got {prime}")

    n %= prime
    if n == 0:
        return 0

    # 1) Divide p-1 into its even and odd components by p-1 = 2^s * q, where q is odd and s >=1
    q = prime - 1
    s = 0
    while q % 2 == 0:
        s += 1
        q //= 2

    # 2) Find a quadratic non residue
    z = find_non_residue(prime)

    # 3) Configure initial variables
    m = s
    c = modular_power(z, q, prime)
    t = modular_power(n, q, prime)
    r = modular_power(n, (q + 1) // 2, prime)

    # 4) Repeat until t == 1
    while t != 1:

        # First find the least integer i such that t^(2^i) = 1 (mod p)
        i = 0
        factor = t
        while factor != 1:
            factor = mul_mod(factor, factor, prime)
            i += 1
            if i == m:
                logger.warning(f"No i < {m} with t^(2^i) = 1 (mod {prime}); {n} is not a quadratic residue")
                return None

        # Reassign variables
        b = modular_power(c, 1 << (m - i - 1), prime)
        c = mul_mod(b, b, prime)
        r = mul_mod(r, b, prime)
        t = mul_mod(t, c, prime)
        m = i

    return r


def square_root(n: int, prime: int) -> Optional[int]:
    """
    Returns an integer r such that r^2 = n (mod prime), or None if n is a quadratic non-residue.

    Raises ModulusError if prime is even and not 2.
    """
    check_word(n, "n")
    check_word(prime, "prime")

    # Only one nonzero residue mod 2
    if prime == 2:
        return n % 2

    if prime % 2 == 0:
        raise ModulusError(f"Even modulus {prime} is not an odd prime")

    # Trivial case
    residue = n % prime
    if residue == 0:
        return 0

    if legendre_symbol(residue, prime) != 1:
        logger.debug(f"{n} is a quadratic non-residue mod {prime}")
        return None

    # p = 3 (mod 4) case
    if prime % 4 == 3:
        logger.debug(f"Using closed form n^((p+1)/4) for p = {prime}")
        return modular_power(residue, (prime + 1) // 4, prime)

    # --- GENERAL CASE --- #
    logger.debug(f"Using Tonelli-Shanks reduction for p = {prime}")
    return tonelli_shanks(residue, prime)


def square_roots(n: int, prime: int) -> Optional[Tuple[int, int]]:
    """
    Returns both square roots of n mod prime as (low, high), or None if n is a quadratic non-residue.
    Note that if r is a root then so is p - r. For n = 0 (mod prime) both roots are 0.
    """
    r = square_root(n, prime)
    if r is None:
        return None

    neg_r = (prime - r) % prime
    return min(r, neg_r), max(r, neg_r)
