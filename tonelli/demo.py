"""
Example call site: print the square roots of n modulo p

    python -m tonelli.demo [n] [p]

Defaults to n = 2, p = 7.
"""
import sys
from typing import Optional, Sequence

from tonelli.sqrt import square_root, square_roots

DEFAULT_N = 2
DEFAULT_P = 7
USAGE = "usage: python -m tonelli.demo [n] [p]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 2:
        print(USAGE)
        return 2

    # WordSizeError and ModulusError are ValueErrors too
    try:
        n = int(args[0]) if len(args) > 0 else DEFAULT_N
        p = int(args[1]) if len(args) > 1 else DEFAULT_P
        root = square_root(n, p)
    except ValueError as e:
        print(f"error: {e}")
        print(USAGE)
        return 2

    if root is None:
        print("No square root exists")
        return 0

    print(f"Square root: {root}")
    print(f"{root}² ≡ {root * root % p} (mod {p})")

    r1, r2 = square_roots(n, p)
    print(f"Both square roots: {r1} and {r2}")
    print(f"{r1}² ≡ {r2}² ≡ {n % p} (mod {p})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
