"""
The custom exceptions used throughout tonelli
"""
__all__ = ["TonelliError", "ModulusError", "WordSizeError", "NonResidueSearchError"]


class TonelliError(Exception):
    """
    Base class for every error raised by tonelli
    """
    pass


class ModulusError(TonelliError, ValueError):
    """
    For use when the modulus is zero, or is even but not 2 where a prime is required
    """
    pass


class WordSizeError(TonelliError, ValueError):
    """
    For use when an argument is not an unsigned 64-bit integer
    """
    pass


class NonResidueSearchError(TonelliError, ArithmeticError):
    """
    For use when no quadratic non-residue exists below the given modulus. This only happens for a non-prime modulus.
    """
    pass
