"""
Helper functions for quadratic residues modulo an odd prime

The modulus is assumed to be prime and is never tested for primality. A composite modulus does not raise here, it
simply yields answers that are mathematically meaningless.
"""
from tonelli.arithmetic import check_modulus, check_word, modular_power
from tonelli.core import NonResidueSearchError, get_logger

__all__ = ["legendre_symbol", "is_quadratic_residue", "find_non_residue"]

logger = get_logger(__name__)


def legendre_symbol(value: int, prime: int) -> int:
    """
    Returns (value | prime) = {
        0 if value % prime == 0
        1 if value % prime != 0 and value is a quadratic residue mod prime
        -1 if value % prime != 0 and value is a quadratic non-residue mod prime
    }
    We use Euler's criterion which states:
        (value | prime) = value^((prime-1)/2) (mod prime)

    For a prime modulus the criterion is always 1 or prime-1. Any other result can only come from a composite modulus
    and is reported as 0.
    """
    check_word(value, "value")
    check_modulus(prime)

    residue = value % prime
    if residue == 0:
        return 0

    criterion = modular_power(residue, (prime - 1) // 2, prime)
    if criterion == 1:
        return 1
    elif criterion == prime - 1:
        return -1
    return 0


def is_quadratic_residue(value: int, prime: int) -> bool:
    """
    Returns True if (value|prime) != -1. (We include 0 as quadratic residues.)
    """
    return legendre_symbol(value, prime) != -1


def find_non_residue(prime: int) -> int:
    """
    Returns the smallest z in [2, prime) with (z | prime) = -1.

    Half of the nonzero residues modulo an odd prime are non-residues, so the scan always terminates for a genuine
    prime. Running off the end of the range means the modulus was not an odd prime.
    """
    check_modulus(prime)

    for z in range(2, prime):
        if legendre_symbol(z, prime) == -1:
            return z

    logger.error(f"No quadratic non-residue found below {prime}")
    raise NonResidueSearchError(f"No quadratic non-residue modulo {prime}; modulus is not an odd prime")
