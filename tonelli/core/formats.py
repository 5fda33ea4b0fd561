"""
The tonelli standard formats
"""
from typing import Final

__all__ = ["WORD", "LOGGING"]


class WORD:
    """
    All values are unsigned integers which fit in a single machine word
    """
    BITS: Final[int] = 64
    MAX: Final[int] = (1 << 64) - 1


class LOGGING:
    ROOT: Final[str] = "tonelli"
    DEFAULT_LEVEL: Final[str] = "WARNING"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
